"""Signable document API resources (reports and evidence reports)."""

from uuid import UUID

import falcon.asgi

from perioscan.application.dto.document_dto import DocumentUpdateInput
from perioscan.application.use_cases.document.finalize_document import FinalizeDocumentUseCase
from perioscan.application.use_cases.document.get_document import GetDocumentUseCase
from perioscan.application.use_cases.document.sign_document import SignDocumentUseCase
from perioscan.application.use_cases.document.update_document import UpdateDocumentUseCase
from perioscan.application.use_cases.document.verification_link import (
    GetVerificationLinkUseCase,
)
from perioscan.application.use_cases.document.verify_by_hash import VerifyDocumentByHashUseCase
from perioscan.application.use_cases.document.verify_signature import (
    VerifyDocumentSignatureUseCase,
)
from perioscan.domain.entities import SignableDocument
from perioscan.domain.exceptions import (
    DocumentAlreadySigned,
    InvalidInput,
    InvalidStatus,
    NotFound,
    PermissionDenied,
)

_UPDATABLE_FIELDS = ("title", "content", "conclusion", "methodology", "findings")


def _require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return request user or set 401 and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


def _parse_id(document_id: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(document_id)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid document id"}
        return None


def _set_error(resp: falcon.asgi.Response, error: Exception) -> None:
    """Map a domain exception to an HTTP error response."""
    if isinstance(error, NotFound):
        resp.status = falcon.HTTP_404
        resp.media = {"error": "Document not found"}
    elif isinstance(error, PermissionDenied):
        resp.status = falcon.HTTP_403
        resp.media = {"error": str(error) or "Permission denied"}
    else:
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(error)}


class DocumentResource:
    """GET/PATCH /v1/{kind}/{document_id}."""

    def __init__(
        self, get_document: GetDocumentUseCase, update_document: UpdateDocumentUseCase
    ) -> None:
        self._get_document = get_document
        self._update_document = update_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Get document by id."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        try:
            document = await self._get_document.execute(user.user_id, user.role, doc_id)
        except (NotFound, PermissionDenied) as e:
            _set_error(resp, e)
            return
        resp.media = _document_to_dict(document)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Edit an unsigned document."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        body = await req.get_media(default_when_empty={})
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "JSON object expected"}
            return
        unknown = set(body) - set(_UPDATABLE_FIELDS)
        if unknown:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Fields cannot be updated: {', '.join(sorted(unknown))}"}
            return
        if any(not isinstance(v, str) for v in body.values()):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Field values must be strings"}
            return
        try:
            document = await self._update_document.execute(
                user.user_id, user.role, doc_id, DocumentUpdateInput(**body)
            )
        except (NotFound, PermissionDenied, InvalidInput, DocumentAlreadySigned) as e:
            _set_error(resp, e)
            return
        resp.media = _document_to_dict(document)
        resp.status = falcon.HTTP_200


class FinalizeResource:
    """POST /v1/{kind}/{document_id}/finalize."""

    def __init__(self, finalize_document: FinalizeDocumentUseCase) -> None:
        self._finalize_document = finalize_document

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Finalize a draft."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        try:
            document = await self._finalize_document.execute(user.user_id, user.role, doc_id)
        except (NotFound, PermissionDenied, InvalidStatus) as e:
            _set_error(resp, e)
            return
        resp.media = _document_to_dict(document)
        resp.status = falcon.HTTP_200


class SignResource:
    """POST /v1/{kind}/{document_id}/sign."""

    def __init__(self, sign_document: SignDocumentUseCase) -> None:
        self._sign_document = sign_document

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Sign a finalized document as the calling user."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        try:
            document = await self._sign_document.execute(user.as_signer(), doc_id)
        except (NotFound, PermissionDenied, InvalidStatus, DocumentAlreadySigned, InvalidInput) as e:
            _set_error(resp, e)
            return
        resp.media = _document_to_dict(document)
        resp.status = falcon.HTTP_200


class VerifyResource:
    """GET /v1/{kind}/{document_id}/verify - full cryptographic verification."""

    def __init__(self, verify_signature: VerifyDocumentSignatureUseCase) -> None:
        self._verify_signature = verify_signature

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Verify stored signature against current content."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        try:
            result = await self._verify_signature.execute(user.user_id, user.role, doc_id)
        except (NotFound, PermissionDenied, InvalidStatus) as e:
            _set_error(resp, e)
            return
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200


class PublicVerifyResource:
    """GET /v1/{kind}/verify/{document_id}?hash=&code= - anonymous check."""

    def __init__(self, verify_by_hash: VerifyDocumentByHashUseCase) -> None:
        self._verify_by_hash = verify_by_hash

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Compare printed hash and code with stored signature."""
        try:
            result = await self._verify_by_hash.execute(
                document_id, req.get_param("hash") or "", req.get_param("code") or ""
            )
        except InvalidInput as e:
            _set_error(resp, e)
            return
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200


class VerificationLinkResource:
    """GET /v1/{kind}/{document_id}/verification-link and .../verification-qr."""

    def __init__(self, verification_link: GetVerificationLinkUseCase) -> None:
        self._verification_link = verification_link

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Verification URL with hash and code."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        try:
            link = await self._verification_link.execute(user.user_id, user.role, doc_id)
        except (NotFound, PermissionDenied, InvalidStatus) as e:
            _set_error(resp, e)
            return
        resp.media = {
            "url": link.url,
            "contentHash": link.content_hash,
            "verificationCode": link.verification_code,
        }
        resp.status = falcon.HTTP_200

    async def on_get_qr(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """QR code PNG encoding the verification URL."""
        user = _require_user(req, resp)
        doc_id = _parse_id(document_id, resp) if user else None
        if not doc_id:
            return
        try:
            png = await self._verification_link.render_qr(user.user_id, user.role, doc_id)
        except (NotFound, PermissionDenied, InvalidStatus) as e:
            _set_error(resp, e)
            return
        resp.content_type = "image/png"
        resp.data = png
        resp.status = falcon.HTTP_200


def _document_to_dict(d: SignableDocument) -> dict:
    signature = d.digital_signature
    out = {
        "id": str(d.id),
        "kind": d.kind.value,
        "title": d.title,
        "content": d.content,
        "conclusion": d.conclusion,
        "methodology": d.methodology,
        "expertResponsible": d.expert_responsible,
        "status": d.status.value,
        "createdAt": d.created_at.isoformat(),
        "updatedAt": d.updated_at.isoformat(),
        "digitalSignature": None,
    }
    if d.findings is not None or d.evidence_id is not None:
        out["findings"] = d.findings
        out["evidenceId"] = str(d.evidence_id) if d.evidence_id else None
    if signature:
        out["digitalSignature"] = {
            "signedBy": signature.signed_by,
            "signatureDate": signature.signature_date.isoformat(),
            "signatureData": signature.signature_data,
            "contentHash": signature.content_hash,
            "verificationCode": signature.verification_code,
        }
    return out
