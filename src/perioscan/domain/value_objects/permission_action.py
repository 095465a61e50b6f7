"""Permission actions for RBAC."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions that can be performed on signable documents."""

    READ = "read"
    UPDATE = "update"
    SIGN = "sign"
    VERIFY = "verify"
