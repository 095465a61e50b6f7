"""Document DTOs."""

from dataclasses import dataclass


@dataclass
class DocumentUpdateInput:
    """Editable fields of a signable document. None means unchanged."""

    title: str | None = None
    content: str | None = None
    conclusion: str | None = None
    methodology: str | None = None
    findings: str | None = None

    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (self.title, self.content, self.conclusion, self.methodology, self.findings)
        )


@dataclass
class VerificationLinkOutput:
    """Public verification URL for a signed document."""

    url: str
    content_hash: str
    verification_code: str
