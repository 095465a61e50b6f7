"""Domain entities."""

from perioscan.domain.entities.digital_signature import DigitalSignature
from perioscan.domain.entities.document_version import DocumentVersion
from perioscan.domain.entities.signable_document import SignableDocument
from perioscan.domain.entities.signer import Signer

__all__ = [
    "DigitalSignature",
    "DocumentVersion",
    "SignableDocument",
    "Signer",
]
