"""Document version history repository port."""

from typing import Protocol
from uuid import UUID

from perioscan.domain.entities import DocumentVersion


class DocumentVersionRepository(Protocol):
    """Port for append-only version history."""

    async def append(self, version: DocumentVersion) -> DocumentVersion: ...

    async def list_by_document(self, document_id: UUID) -> list[DocumentVersion]: ...
