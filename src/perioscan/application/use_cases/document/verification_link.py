"""Verification link and QR code for signed documents."""

from uuid import UUID

from perioscan.application.dto.document_dto import VerificationLinkOutput
from perioscan.application.ports import PermissionChecker, QRCodeRenderer
from perioscan.application.services.verification_url import build_verification_url
from perioscan.application.use_cases.document.get_document import get_document_or_raise
from perioscan.domain.exceptions import InvalidStatus, PermissionDenied
from perioscan.domain.value_objects import DocumentKind, PermissionAction


class GetVerificationLinkUseCase:
    """Build the public verification URL (and its QR code) for PDF exports."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        qr_renderer: QRCodeRenderer,
        base_url: str,
        kind: DocumentKind,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._qr_renderer = qr_renderer
        self._base_url = base_url
        self._kind = kind

    async def execute(self, user_id: str, role: str, document_id: UUID) -> VerificationLinkOutput:
        """Return verification URL for a signed document."""
        async with self._uow_factory() as uow:
            document = await get_document_or_raise(uow, self._kind, document_id)

        if not await self._permission_checker.check(
            user_id, role, document, PermissionAction.READ
        ):
            raise PermissionDenied("User does not have read access to document")
        signature = document.digital_signature
        if signature is None:
            raise InvalidStatus("Document is not signed")

        return VerificationLinkOutput(
            url=build_verification_url(
                self._base_url, document.id, signature.content_hash, signature.verification_code
            ),
            content_hash=signature.content_hash,
            verification_code=signature.verification_code,
        )

    async def render_qr(self, user_id: str, role: str, document_id: UUID) -> bytes:
        """PNG QR code encoding the verification URL."""
        link = await self.execute(user_id, role, document_id)
        return self._qr_renderer.render_png(link.url)
