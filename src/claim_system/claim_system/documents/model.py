from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    """Supporting file as received from the caller."""

    content: bytes
    filename: str

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class DocumentDownload:
    content: bytes
    filename: str
    content_type: str
