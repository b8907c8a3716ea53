"""
Shared test configuration and fixtures
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from http_swagger.assets import DirectoryAssetStore
from http_swagger.registry import DocumentRegistry

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def doc_registry():
    """A registry isolated from the process-wide one"""
    return DocumentRegistry()


@pytest.fixture
def asset_dir(tmp_path):
    """A flat directory standing in for the Swagger UI distribution"""
    (tmp_path / "favicon-16x16.png").write_bytes(PNG_BYTES)
    (tmp_path / "swagger-ui.css").write_text("body { margin: 0; }")
    (tmp_path / "swagger-ui-bundle.js").write_text("var SwaggerUIBundle = {};")
    return tmp_path


@pytest.fixture
def asset_store(asset_dir):
    return DirectoryAssetStore(asset_dir)


@pytest.fixture
def make_client():
    """Mount a router on a fresh app and return a client that does not follow redirects"""

    def _make(router, prefix: str = ""):
        app = FastAPI(openapi_url=None, docs_url=None, redoc_url=None)
        app.include_router(router, prefix=prefix)
        return TestClient(app, follow_redirects=False)

    return _make
