"""Signable document lifecycle status."""

from enum import StrEnum


class DocumentStatus(StrEnum):
    """Lifecycle of a report: draft -> finalized -> signed (terminal)."""

    DRAFT = "rascunho"
    FINALIZED = "finalizado"
    SIGNED = "assinado"
