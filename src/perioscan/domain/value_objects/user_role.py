"""User roles."""

from enum import StrEnum


class UserRole(StrEnum):
    """Roles known to the service, highest privilege first."""

    ADMIN = "admin"
    PERITO = "perito"
    ASSISTENTE = "assistente"
