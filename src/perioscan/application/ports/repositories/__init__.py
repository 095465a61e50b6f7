"""Repository ports."""

from perioscan.application.ports.repositories.document_version_repository import (
    DocumentVersionRepository,
)
from perioscan.application.ports.repositories.signable_document_repository import (
    SignableDocumentRepository,
)

__all__ = [
    "DocumentVersionRepository",
    "SignableDocumentRepository",
]
