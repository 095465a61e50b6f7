"""Domain value objects."""

from perioscan.domain.value_objects.content_hash import ContentHash
from perioscan.domain.value_objects.document_kind import DocumentKind
from perioscan.domain.value_objects.document_status import DocumentStatus
from perioscan.domain.value_objects.permission_action import PermissionAction
from perioscan.domain.value_objects.user_role import UserRole
from perioscan.domain.value_objects.verification_code import (
    VERIFICATION_ALPHABET,
    VERIFICATION_CODE_LENGTH,
    generate_verification_code,
    is_well_formed_code,
)
from perioscan.domain.value_objects.verification_reason import VerificationReason

__all__ = [
    "VERIFICATION_ALPHABET",
    "VERIFICATION_CODE_LENGTH",
    "ContentHash",
    "DocumentKind",
    "DocumentStatus",
    "PermissionAction",
    "UserRole",
    "VerificationReason",
    "generate_verification_code",
    "is_well_formed_code",
]
