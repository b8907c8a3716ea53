from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from typing import Optional
import logging

from .assets import AssetStore, default_asset_store
from .config import Option, new_config, url
from .registry import DocumentProvider, read_doc
from .renderer import render_bootstrap_script, render_index

logger = logging.getLogger(__name__)

INDEX_PATH = "index.html"
INITIALIZER_PATH = "swagger-initializer.js"
DEFAULT_DOC_PATH = "doc.json"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def handler(
    *options: Option,
    provider: DocumentProvider = read_doc,
    assets: Optional[AssetStore] = None,
    doc_path: str = DEFAULT_DOC_PATH,
) -> APIRouter:
    """
    Build a router serving Swagger UI. Include it under any prefix:

        app.include_router(handler(url("/openapi.json")), prefix="/swagger")

    Only the last path segment after the prefix is looked at.
    """
    config = new_config(*options).model_copy(deep=True)
    if assets is None:
        assets = default_asset_store()

    router = APIRouter()
    logger.info(
        f"Swagger UI handler created (url={config.url}, instance={config.instance_name})"
    )

    def resolve(name: str):
        if name == "":
            return "redirect"
        if name == INDEX_PATH:
            return "index"
        if name == INITIALIZER_PATH:
            return "initializer"
        if name == doc_path:
            return "doc"
        asset = assets.get(name)
        if asset is not None:
            return asset
        return None

    @router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    def serve(request: Request, path: str):
        name = path.rsplit("/", 1)[-1]
        target = resolve(name)
        if target is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
        if request.method != "GET":
            raise HTTPException(
                status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
                detail="Method Not Allowed",
                headers={"Allow": "GET"},
            )

        if target == "redirect":
            return RedirectResponse(
                url=request.url.path + INDEX_PATH,
                status_code=status.HTTP_301_MOVED_PERMANENTLY,
            )
        if target == "index":
            return HTMLResponse(render_index(config))
        if target == "initializer":
            return Response(
                render_bootstrap_script(config), media_type="application/javascript"
            )
        if target == "doc":
            document = provider(config.instance_name)
            if document is None:
                logger.warning(f"No spec document registered as {config.instance_name}")
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
            return Response(document, media_type="application/json; charset=utf-8")
        return Response(target.body, media_type=target.content_type)

    return router


wrap_handler = handler(url(DEFAULT_DOC_PATH))
