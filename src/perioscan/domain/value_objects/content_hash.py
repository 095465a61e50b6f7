"""Content hash binding a document's identity to its mutable text."""

import hashlib
import re
from dataclasses import dataclass

_HEX_SHA256 = re.compile(r"^[0-9a-f]{64}$")


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 hex digest of id + content + conclusion."""

    value: str

    def __post_init__(self) -> None:
        if not _HEX_SHA256.match(self.value):
            raise ValueError("Content hash must be 64 lowercase hex characters")

    @classmethod
    def compute(cls, document_id: str, content: str, conclusion: str | None) -> "ContentHash":
        """Hash the fixed concatenation; order must never change or old signatures break."""
        digest = hashlib.sha256()
        digest.update((document_id + content + (conclusion or "")).encode("utf-8"))
        return cls(digest.hexdigest())

    def __str__(self) -> str:
        return self.value
