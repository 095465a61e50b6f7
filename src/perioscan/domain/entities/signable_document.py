"""Signable document entity - a forensic report or evidence report."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from perioscan.domain.entities.digital_signature import DigitalSignature
from perioscan.domain.value_objects import DocumentKind, DocumentStatus


@dataclass
class SignableDocument:
    """Report whose content and conclusion are bound by a digital signature."""

    id: UUID
    kind: DocumentKind
    title: str
    content: str
    expert_responsible: str
    status: DocumentStatus
    created_at: datetime
    updated_at: datetime
    conclusion: str | None = None
    methodology: str | None = None
    findings: str | None = None
    evidence_id: UUID | None = None
    digital_signature: DigitalSignature | None = None

    @property
    def is_signed(self) -> bool:
        return self.status == DocumentStatus.SIGNED or self.digital_signature is not None
