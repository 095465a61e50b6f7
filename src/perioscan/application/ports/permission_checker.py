"""Permission checker port - RBAC authorization on signable documents."""

from typing import Protocol

from perioscan.domain.entities import SignableDocument
from perioscan.domain.value_objects import PermissionAction


class PermissionChecker(Protocol):
    """Port for checking whether a user may act on a document."""

    async def check(
        self, user_id: str, role: str, document: SignableDocument, action: PermissionAction
    ) -> bool: ...
