from __future__ import annotations

import logging
import uuid
from pathlib import Path

from werkzeug.utils import secure_filename

from ..core.exceptions import NotFoundError
from .store import DocumentStore

logger = logging.getLogger(__name__)


class LocalDocumentStore(DocumentStore):
    """Keeps uploaded documents as files in a single directory.

    Keys look like ``<uuid hex>_<sanitised name>`` so every write lands on a
    fresh file and the original extension is kept for content-type lookup.
    """

    def __init__(self, root: str | Path):
        self._root = Path(root)

    def _path_for(self, key: str) -> Path:
        # Keys are generated here; anything else (e.g. "../x") is treated as missing.
        if not key or secure_filename(key) != key:
            raise NotFoundError("Document not found")
        return self._root / key

    def store(self, content: bytes, original_filename: str) -> str:
        safe_name = secure_filename(original_filename or "") or "document"
        key = f"{uuid.uuid4().hex}_{safe_name}"

        self._root.mkdir(parents=True, exist_ok=True)
        self._path_for(key).write_bytes(content)
        logger.info("Stored document %s (%d bytes)", key, len(content))
        return key

    def retrieve(self, key: str) -> bytes:
        path = self._path_for(key)
        if not path.is_file():
            raise NotFoundError("Document not found")
        return path.read_bytes()

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        path.unlink(missing_ok=True)
        logger.info("Deleted document %s", key)
