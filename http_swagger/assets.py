"""
Static assets for the Swagger UI page (bundle JS, CSS, favicons).

The handler only needs something with get(name) -> Asset | None. The
default store serves the swagger-ui-bundle distribution.
"""
from pathlib import Path
from typing import NamedTuple, Optional, Protocol, Union
import logging
import mimetypes

from swagger_ui_bundle import swagger_ui_path

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript",
    ".png": "image/png",
    ".json": "application/json; charset=utf-8",
}


class Asset(NamedTuple):
    body: bytes
    content_type: str


class AssetStore(Protocol):
    def get(self, name: str) -> Optional[Asset]: ...


def content_type_for(name: str) -> str:
    """Content type implied by the file extension of name."""
    content_type = CONTENT_TYPES.get(Path(name).suffix.lower())
    if content_type is None:
        content_type, _ = mimetypes.guess_type(name)
    return content_type or "application/octet-stream"


class DirectoryAssetStore:
    """
    Serves regular files from a directory. Names that resolve outside the
    directory (../, symlinks) are treated as missing.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory).resolve()

    def get(self, name: str) -> Optional[Asset]:
        if not name:
            return None
        try:
            file_path = (self.directory / name).resolve()
            if not file_path.is_relative_to(self.directory):
                logger.warning(f"Refusing asset outside of {self.directory}: {name}")
                return None
            is_file = file_path.is_file()
        except (OSError, ValueError) as e:
            # NUL bytes, names over the filesystem limit
            logger.debug(f"Invalid asset name {name!r}: {e}")
            return None
        if not is_file:
            logger.debug(f"Asset not found: {name}")
            return None
        return Asset(file_path.read_bytes(), content_type_for(name))


def default_asset_store() -> DirectoryAssetStore:
    return DirectoryAssetStore(swagger_ui_path)
