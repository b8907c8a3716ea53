from fastapi import FastAPI, Request
from api import router as api_router
from http_swagger import deep_linking, doc_expansion, handler, register, url
import logging
import os


# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SWAGGER_PREFIX = os.getenv("SWAGGER_PREFIX", "/swagger").rstrip("/")
SWAGGER_DOC_EXPANSION = os.getenv("SWAGGER_DOC_EXPANSION", "list")
SWAGGER_DEEP_LINKING = os.getenv("SWAGGER_DEEP_LINKING", "true").lower() in ("1", "true", "yes")


app = FastAPI(title="http-swagger demo")


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


app.include_router(api_router)

# Resolved lazily on every read of doc.json
register("swagger", app.openapi)

app.include_router(
    handler(
        url("doc.json"),
        deep_linking(SWAGGER_DEEP_LINKING),
        doc_expansion(SWAGGER_DOC_EXPANSION),
    ),
    prefix=SWAGGER_PREFIX,
)
logger.info(f"Swagger UI mounted at {SWAGGER_PREFIX}/")
