"""Signable document repository port."""

from typing import Protocol
from uuid import UUID

from perioscan.domain.entities import DigitalSignature, SignableDocument
from perioscan.domain.value_objects import DocumentStatus


class SignableDocumentRepository(Protocol):
    """Port for report / evidence report persistence."""

    async def get_by_id(self, document_id: UUID) -> SignableDocument | None: ...

    async def update(self, document: SignableDocument) -> SignableDocument | None:
        """Write editable fields unless the row is signed; None when nothing changed."""
        ...

    async def set_status(
        self, document_id: UUID, status: DocumentStatus, expected_status: DocumentStatus
    ) -> bool:
        """Change status only if current status equals expected_status."""
        ...

    async def apply_signature(
        self, document_id: UUID, signature: DigitalSignature
    ) -> bool:
        """Atomically store signature and mark signed if finalized and unsigned.

        Returns False when another writer got there first.
        """
        ...
