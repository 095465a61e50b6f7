"""Snapshot of a document before a content or status change."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from perioscan.domain.value_objects import DocumentStatus


@dataclass
class DocumentVersion:
    """Previous state of a signable document."""

    id: UUID
    document_id: UUID
    content: str
    status: DocumentStatus
    modified_by: str
    modified_at: datetime
    conclusion: str | None = None
    findings: str | None = None
