"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from perioscan.application.ports.repositories.document_version_repository import (
    DocumentVersionRepository,
)
from perioscan.application.ports.repositories.signable_document_repository import (
    SignableDocumentRepository,
)
from perioscan.domain.value_objects import DocumentKind


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def reports(self) -> SignableDocumentRepository: ...

    @property
    def evidence_reports(self) -> SignableDocumentRepository: ...

    @property
    def versions(self) -> DocumentVersionRepository: ...

    def documents(self, kind: DocumentKind) -> SignableDocumentRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
