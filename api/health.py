from fastapi import APIRouter
from http_swagger.registry import registry
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.
    Reports the spec documents the Swagger UI can serve.
    """
    documents = registry.names()
    if not documents:
        logger.warning("Health check: no spec document registered")
    return {
        "status": "healthy",
        "documents": documents,
    }
