"""Permission checker implementation - role and ownership rules."""

from perioscan.domain.entities import SignableDocument
from perioscan.domain.value_objects import PermissionAction, UserRole


class RolePermissionChecker:
    """Admins may do anything; experts act on documents they are responsible for.

    Signing additionally requires the perito role. Reading and verifying
    is open to any authenticated user.
    """

    async def check(
        self, user_id: str, role: str, document: SignableDocument, action: PermissionAction
    ) -> bool:
        """Check if user may perform action on document."""
        if role == UserRole.ADMIN:
            return True
        if action in (PermissionAction.READ, PermissionAction.VERIFY):
            return True
        is_responsible = document.expert_responsible == user_id
        if action == PermissionAction.SIGN:
            return is_responsible and role == UserRole.PERITO
        return is_responsible
