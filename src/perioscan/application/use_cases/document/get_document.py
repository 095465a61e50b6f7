"""Get document use case."""

from uuid import UUID

from perioscan.application.ports import PermissionChecker, UnitOfWork
from perioscan.domain.entities import SignableDocument
from perioscan.domain.exceptions import NotFound, PermissionDenied
from perioscan.domain.value_objects import DocumentKind, PermissionAction


async def get_document_or_raise(
    uow: UnitOfWork, kind: DocumentKind, document_id: UUID
) -> SignableDocument:
    """Fetch document by id or raise NotFound."""
    document = await uow.documents(kind).get_by_id(document_id)
    if not document:
        raise NotFound(kind.value, str(document_id))
    return document


class GetDocumentUseCase:
    """Get a signable document by id."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        kind: DocumentKind,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._kind = kind

    async def execute(self, user_id: str, role: str, document_id: UUID) -> SignableDocument:
        """Get document by id."""
        async with self._uow_factory() as uow:
            document = await get_document_or_raise(uow, self._kind, document_id)

        if not await self._permission_checker.check(
            user_id, role, document, PermissionAction.READ
        ):
            raise PermissionDenied("User does not have read access to document")
        return document
