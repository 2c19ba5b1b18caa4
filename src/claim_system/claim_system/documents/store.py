from __future__ import annotations

import os
from typing import Protocol

CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".jpg": "image/jpeg",
    ".png": "image/png",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    return CONTENT_TYPES.get(ext, DEFAULT_CONTENT_TYPE)


class DocumentStore(Protocol):
    def store(self, content: bytes, original_filename: str) -> str:
        """Persist the bytes under a newly generated key and return the key."""

        raise NotImplementedError

    def retrieve(self, key: str) -> bytes:
        """Raise NotFoundError when nothing is stored under key."""

        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError
