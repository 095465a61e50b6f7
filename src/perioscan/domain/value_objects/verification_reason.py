"""Reasons a verification can fail."""

from enum import StrEnum


class VerificationReason(StrEnum):
    """Negative verification outcomes. These are results, not errors."""

    NO_SIGNATURE = "NoSignature"
    INVALID_TOKEN = "InvalidToken"
    CONTENT_MISMATCH = "ContentMismatch"
    DOCUMENT_MISMATCH = "DocumentMismatch"
    INVALID_CODE = "InvalidCode"
    DOCUMENT_NOT_FOUND = "DocumentNotFound"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    VerificationReason.NO_SIGNATURE: "Document has no digital signature",
    VerificationReason.INVALID_TOKEN: "Signature is invalid or corrupted",
    VerificationReason.CONTENT_MISMATCH: "Document content was changed after signing",
    VerificationReason.DOCUMENT_MISMATCH: "Signature does not belong to this document",
    VerificationReason.INVALID_CODE: "Invalid verification code",
    VerificationReason.DOCUMENT_NOT_FOUND: "Document not found",
}
