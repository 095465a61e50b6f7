"""Update document use case - edits content of unsigned documents."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from perioscan.application.dto.document_dto import DocumentUpdateInput
from perioscan.application.ports import PermissionChecker
from perioscan.application.use_cases.document.get_document import get_document_or_raise
from perioscan.domain.entities import DocumentVersion, SignableDocument
from perioscan.domain.exceptions import DocumentAlreadySigned, InvalidInput, PermissionDenied
from perioscan.domain.value_objects import DocumentKind, PermissionAction
from perioscan.logging import get_logger

logger = get_logger(__name__)


class UpdateDocumentUseCase:
    """Edit title/content/conclusion/methodology/findings, keeping a version trail.

    Signed documents are immutable: any edit is rejected.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        kind: DocumentKind,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._kind = kind

    async def execute(
        self, user_id: str, role: str, document_id: UUID, data: DocumentUpdateInput
    ) -> SignableDocument:
        """Apply non-None fields of data to document."""
        if data.is_empty():
            raise InvalidInput("No fields to update")
        if data.findings is not None and self._kind != DocumentKind.EVIDENCE_REPORT:
            raise InvalidInput("findings can only be set on evidence reports")
        if data.title is not None and not data.title.strip():
            raise InvalidInput("title must not be empty")
        if data.content is not None and not data.content.strip():
            raise InvalidInput("content must not be empty")

        async with self._uow_factory() as uow:
            document = await get_document_or_raise(uow, self._kind, document_id)

            if not await self._permission_checker.check(
                user_id, role, document, PermissionAction.UPDATE
            ):
                raise PermissionDenied("User is not allowed to update this document")
            if document.is_signed:
                logger.warning(
                    "update_rejected_signed",
                    document_id=str(document_id),
                    kind=self._kind.value,
                    user_id=user_id,
                )
                raise DocumentAlreadySigned("Cannot modify a signed document")

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
            changes = {
                k: v
                for k, v in {
                    "title": data.title,
                    "content": data.content,
                    "conclusion": data.conclusion,
                    "methodology": data.methodology,
                    "findings": data.findings,
                }.items()
                if v is not None
            }
            updated = await uow.documents(self._kind).update(replace(document, **changes))
            if updated is None:
                logger.warning(
                    "update_rejected_signed",
                    document_id=str(document_id),
                    kind=self._kind.value,
                    user_id=user_id,
                )
                raise DocumentAlreadySigned("Document was signed concurrently")

        logger.info(
            "document_updated",
            document_id=str(document_id),
            kind=self._kind.value,
            user_id=user_id,
            fields=sorted(changes),
        )
        return updated
