"""Verify document signature use case (authenticated, full check)."""

from uuid import UUID

from perioscan.application.dto.verification_dto import VerificationResult
from perioscan.application.ports import PermissionChecker
from perioscan.application.services.signature_engine import SignatureEngine
from perioscan.application.use_cases.document.get_document import get_document_or_raise
from perioscan.domain.exceptions import InvalidStatus, PermissionDenied
from perioscan.domain.value_objects import DocumentKind, DocumentStatus, PermissionAction
from perioscan.logging import get_logger

logger = get_logger(__name__)


class VerifyDocumentSignatureUseCase:
    """Decode the stored token and check it against current content."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        signature_engine: SignatureEngine,
        kind: DocumentKind,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._engine = signature_engine
        self._kind = kind

    async def execute(self, user_id: str, role: str, document_id: UUID) -> VerificationResult:
        """Verify signature of document."""
        async with self._uow_factory() as uow:
            document = await get_document_or_raise(uow, self._kind, document_id)

        if not await self._permission_checker.check(
            user_id, role, document, PermissionAction.VERIFY
        ):
            raise PermissionDenied("User is not allowed to verify this document")
        if document.status != DocumentStatus.SIGNED or not document.digital_signature:
            raise InvalidStatus("Document is not signed")

        result = self._engine.verify_signature(document, document.digital_signature)
        logger.info(
            "signature_verified",
            document_id=str(document_id),
            kind=self._kind.value,
            valid=result.valid,
            reason=result.reason.value if result.reason else None,
        )
        return result
