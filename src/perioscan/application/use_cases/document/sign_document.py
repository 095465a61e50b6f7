"""Sign document use case."""

from dataclasses import replace
from uuid import UUID

from perioscan.application.ports import PermissionChecker
from perioscan.application.services.signature_engine import SignatureEngine
from perioscan.application.use_cases.document.get_document import get_document_or_raise
from perioscan.domain.entities import SignableDocument, Signer
from perioscan.domain.exceptions import DocumentAlreadySigned, InvalidStatus, PermissionDenied
from perioscan.domain.value_objects import DocumentKind, DocumentStatus, PermissionAction
from perioscan.logging import get_logger

logger = get_logger(__name__)


class SignDocumentUseCase:
    """Sign a finalized document at most once."""

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

    async def execute(self, signer: Signer, document_id: UUID) -> SignableDocument:
        """Sign document and persist the signature with a conditional update."""
        async with self._uow_factory() as uow:
            document = await get_document_or_raise(uow, self._kind, document_id)

            if not await self._permission_checker.check(
                signer.id, signer.role, document, PermissionAction.SIGN
            ):
                raise PermissionDenied(f"User {signer.id} is not authorized to sign this document")
            if document.is_signed:
                raise DocumentAlreadySigned("Document is already signed")
            if document.status != DocumentStatus.FINALIZED:
                raise InvalidStatus(
                    f"Document must be in '{DocumentStatus.FINALIZED}' status to be signed"
                )

            signature = self._engine.sign_document(document, signer)
            applied = await uow.documents(self._kind).apply_signature(document_id, signature)
            if not applied:
                logger.warning(
                    "sign_conflict",
                    document_id=str(document_id),
                    kind=self._kind.value,
                    signer_id=signer.id,
                )
                raise DocumentAlreadySigned("Document was signed concurrently")

        logger.info(
            "document_signed",
            document_id=str(document_id),
            kind=self._kind.value,
            signer_id=signer.id,
            content_hash=signature.content_hash,
        )
        return replace(document, status=DocumentStatus.SIGNED, digital_signature=signature)
