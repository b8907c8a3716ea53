"""
Registry of spec documents served at <prefix>/doc.json.

A document is registered once under a name (the Config.instance_name) and
may be bytes, str, a dict, or a zero-argument callable returning one of
those. Callables are resolved on every read, so FastAPI's app.openapi can
be registered before the app has finished adding routes.
"""
from typing import Any, Callable, Optional, Union
import json
import logging
import threading

from .errors import DocumentAlreadyRegistered

logger = logging.getLogger(__name__)

DEFAULT_NAME = "swagger"

Document = Union[bytes, str, dict, Callable[[], Any]]
DocumentProvider = Callable[[str], Optional[bytes]]


def _to_bytes(document: Any) -> bytes:
    if callable(document):
        document = document()
    if isinstance(document, bytes):
        return document
    if isinstance(document, str):
        return document.encode("utf-8")
    return json.dumps(document).encode("utf-8")


class DocumentRegistry:
    def __init__(self):
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    def register(self, name: str, document: Document):
        with self._lock:
            if name in self._documents:
                raise DocumentAlreadyRegistered(name)
            self._documents[name] = document
        logger.info(f"Registered spec document: {name}")

    def unregister(self, name: str):
        with self._lock:
            self._documents.pop(name, None)

    def read_doc(self, name: str = DEFAULT_NAME) -> Optional[bytes]:
        """
        Return the document registered under name, or None if there is none.
        Errors raised by a callable document propagate to the caller.
        """
        document = self._documents.get(name)
        if document is None:
            return None
        return _to_bytes(document)

    def names(self) -> list[str]:
        return sorted(self._documents)

    def clear(self):
        with self._lock:
            self._documents.clear()


registry = DocumentRegistry()


def register(name: str, document: Document):
    registry.register(name, document)


def read_doc(name: str = DEFAULT_NAME) -> Optional[bytes]:
    return registry.read_doc(name)
