"""Signature engine - signs documents and verifies signatures.

Two verification paths with different guarantees:

* ``verify_signature`` decodes the signed token and recomputes the content
  hash from the document's *current* content. It detects token tampering
  and any post-signature edit of content or conclusion.
* ``verify_document_by_hash`` is the public QR/URL check. It only compares
  the caller-supplied hash and code against the values stored at signing
  time; it does not decode the token nor recompute the hash, so on its own
  it cannot detect a document edited after signing.

The engine is stateless. Persisting a signature and moving the document to
``assinado`` is the caller's job and must be a single conditional update.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from perioscan.application.dto.verification_dto import VerificationResult
from perioscan.application.ports import TokenSigner
from perioscan.application.services.relative_time import human_relative_time
from perioscan.domain.entities import DigitalSignature, SignableDocument, Signer
from perioscan.domain.exceptions import InvalidInput, InvalidToken
from perioscan.domain.value_objects import (
    ContentHash,
    VerificationReason,
    generate_verification_code,
)

_REQUIRED_CLAIMS = ("documentId", "contentHash", "signedBy", "signatureDate")


def _utcnow() -> datetime:
    return datetime.now(UTC)


def compute_content_hash(document: SignableDocument) -> str:
    """Content hash over the document's current id, content and conclusion."""
    return ContentHash.compute(str(document.id), document.content, document.conclusion).value


class SignatureEngine:
    """Issues and verifies digital signatures over signable documents."""

    def __init__(
        self,
        token_signer: TokenSigner,
        clock: Callable[[], datetime] = _utcnow,
        code_generator: Callable[[], str] = generate_verification_code,
    ) -> None:
        self._token_signer = token_signer
        self._clock = clock
        self._code_generator = code_generator

    def sign_document(self, document: SignableDocument, signer: Signer) -> DigitalSignature:
        """Bind document identity, content hash and signer into a signed token."""
        if document is None or not getattr(document, "id", None):
            raise InvalidInput("Document must have an id")
        if getattr(document, "content", None) is None:
            raise InvalidInput("Document must have content")
        if signer is None or not getattr(signer, "id", None):
            raise InvalidInput("Signer must have an id")

        content_hash = compute_content_hash(document)
        signature_date = self._clock()
        claims = {
            "documentId": str(document.id),
            "contentHash": content_hash,
            "signedBy": signer.to_claims(),
            "signatureDate": signature_date.isoformat(),
        }
        token = self._token_signer.encode(claims)

        return DigitalSignature(
            signed_by=signer.id,
            signature_date=signature_date,
            signature_data=token,
            content_hash=content_hash,
            verification_code=self._code_generator(),
        )

    def verify_signature(
        self, document: SignableDocument, signature: DigitalSignature | None
    ) -> VerificationResult:
        """Full verification: token integrity, then content, then document identity."""
        if signature is None or not signature.signature_data:
            return VerificationResult.failure(VerificationReason.NO_SIGNATURE)

        try:
            claims = self._token_signer.decode(signature.signature_data)
        except InvalidToken as e:
            return VerificationResult.failure(VerificationReason.INVALID_TOKEN, error=str(e))
        if not _has_required_claims(claims):
            return VerificationResult.failure(
                VerificationReason.INVALID_TOKEN, error="Token is missing signature claims"
            )

        current_hash = compute_content_hash(document)
        if claims["contentHash"] != current_hash:
            return VerificationResult.failure(
                VerificationReason.CONTENT_MISMATCH,
                expected_hash=claims["contentHash"],
                current_hash=current_hash,
            )

        if claims["documentId"] != str(document.id):
            return VerificationResult.failure(VerificationReason.DOCUMENT_MISMATCH)

        return VerificationResult(
            valid=True,
            signed_by=claims["signedBy"],
            signature_date=claims["signatureDate"],
            age=self._age(claims["signatureDate"]),
        )

    def verify_document_by_hash(
        self,
        document_id: str,
        content_hash: str,
        verification_code: str,
        document: SignableDocument | None,
    ) -> VerificationResult:
        """Public check: printed hash and code against stored values only.

        Weaker than verify_signature - see module docstring.
        """
        if document is None:
            return VerificationResult.failure(VerificationReason.DOCUMENT_NOT_FOUND)

        signature = document.digital_signature
        if signature is None:
            return VerificationResult.failure(VerificationReason.NO_SIGNATURE)

        if signature.verification_code != verification_code:
            return VerificationResult.failure(VerificationReason.INVALID_CODE)

        if signature.content_hash != content_hash:
            return VerificationResult.failure(VerificationReason.CONTENT_MISMATCH)

        return VerificationResult(
            valid=True,
            document={
                "id": str(document.id),
                "title": document.title,
                "signedBy": signature.signed_by,
                "signatureDate": signature.signature_date.isoformat(),
                "age": human_relative_time(signature.signature_date, self._clock()),
            },
        )

    def _age(self, signature_date: str) -> str | None:
        try:
            signed_at = datetime.fromisoformat(signature_date)
        except (TypeError, ValueError):
            return None
        return human_relative_time(signed_at, self._clock())


def _has_required_claims(claims: dict[str, Any]) -> bool:
    return all(claims.get(key) for key in _REQUIRED_CLAIMS) and isinstance(
        claims.get("signedBy"), dict
    )
