"""Finalize document use case - draft to finalized."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from perioscan.application.ports import PermissionChecker
from perioscan.application.use_cases.document.get_document import get_document_or_raise
from perioscan.domain.entities import DocumentVersion, SignableDocument
from perioscan.domain.exceptions import InvalidStatus, PermissionDenied
from perioscan.domain.value_objects import DocumentKind, DocumentStatus, PermissionAction
from perioscan.logging import get_logger

logger = get_logger(__name__)


class FinalizeDocumentUseCase:
    """Move a draft document to finalized so it can be signed."""

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
        """Finalize document."""
        async with self._uow_factory() as uow:
            document = await get_document_or_raise(uow, self._kind, document_id)
            if not await self._permission_checker.check(
                user_id, role, document, PermissionAction.UPDATE
            ):
                raise PermissionDenied("User is not allowed to finalize this document")
            if document.status != DocumentStatus.DRAFT:
                raise InvalidStatus(
                    f"Document must be in '{DocumentStatus.DRAFT}' status to be finalized"
                )

            changed = await uow.documents(self._kind).set_status(
                document_id, DocumentStatus.FINALIZED, expected_status=DocumentStatus.DRAFT
            )
            if not changed:
                raise InvalidStatus("Document status changed concurrently")
            await uow.versions.append(
                DocumentVersion(
                    id=uuid4(),
                    document_id=document.id,
                    content=document.content,
                    conclusion=document.conclusion,
                    findings=document.findings,
                    status=document.status,
                    modified_by=user_id,
                    modified_at=datetime.now(UTC),
                )
            )

        logger.info(
            "document_finalized", document_id=str(document_id), kind=self._kind.value, user_id=user_id
        )
        return replace(document, status=DocumentStatus.FINALIZED)
