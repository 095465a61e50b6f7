"""Verification result DTO."""

from dataclasses import dataclass
from typing import Any

from perioscan.domain.value_objects import VerificationReason


@dataclass
class VerificationResult:
    """Outcome of a verification. Negative outcomes are data, never exceptions."""

    valid: bool
    reason: VerificationReason | None = None
    message: str | None = None
    error: str | None = None
    expected_hash: str | None = None
    current_hash: str | None = None
    signed_by: dict[str, Any] | None = None
    signature_date: str | None = None
    age: str | None = None
    document: dict[str, Any] | None = None

    @classmethod
    def failure(cls, reason: VerificationReason, **details: Any) -> "VerificationResult":
        return cls(valid=False, reason=reason, message=reason.message, **details)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape (camelCase), dropping unset fields."""
        out: dict[str, Any] = {"valid": self.valid}
        fields = {
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "error": self.error,
            "expectedHash": self.expected_hash,
            "currentHash": self.current_hash,
            "signedBy": self.signed_by,
            "signatureDate": self.signature_date,
            "age": self.age,
            "document": self.document,
        }
        out.update({k: v for k, v in fields.items() if v is not None})
        return out
