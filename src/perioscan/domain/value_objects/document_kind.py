"""Kinds of documents eligible for digital signing."""

from enum import StrEnum


class DocumentKind(StrEnum):
    """Signable document kinds, one table each."""

    REPORT = "report"
    EVIDENCE_REPORT = "evidence_report"
