"""Public verification by printed hash and verification code."""

from uuid import UUID

from perioscan.application.dto.verification_dto import VerificationResult
from perioscan.application.services.signature_engine import SignatureEngine
from perioscan.domain.exceptions import InvalidInput
from perioscan.domain.value_objects import DocumentKind, is_well_formed_code
from perioscan.logging import get_logger

logger = get_logger(__name__)


class VerifyDocumentByHashUseCase:
    """Anonymous QR/URL check against stored hash and code.

    Does not detect edits made after signing on its own; see
    SignatureEngine.verify_document_by_hash.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        signature_engine: SignatureEngine,
        kind: DocumentKind,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._engine = signature_engine
        self._kind = kind

    async def execute(
        self, document_id: UUID | str, content_hash: str, verification_code: str
    ) -> VerificationResult:
        """Verify document by hash and code.

        An id that is not a UUID cannot name a stored document and yields
        DocumentNotFound like any unknown id.
        """
        if not content_hash or not verification_code:
            raise InvalidInput("Hash and verification code are required")
        if not is_well_formed_code(verification_code):
            raise InvalidInput("Malformed verification code")

        try:
            doc_uuid = document_id if isinstance(document_id, UUID) else UUID(document_id)
        except ValueError:
            doc_uuid = None

        document = None
        if doc_uuid is not None:
            async with self._uow_factory() as uow:
                document = await uow.documents(self._kind).get_by_id(doc_uuid)

        result = self._engine.verify_document_by_hash(
            str(document_id), content_hash, verification_code, document
        )
        logger.info(
            "public_verification",
            document_id=str(document_id),
            kind=self._kind.value,
            valid=result.valid,
            reason=result.reason.value if result.reason else None,
        )
        return result
