"""Access gate - turns a denied permission check into Forbidden."""

import logging

from rolegate.application.ports import PermissionChecker
from rolegate.domain.exceptions import Forbidden
from rolegate.domain.value_objects import PermissionsInput

logger = logging.getLogger(__name__)


class AccessGate:
    """Gate variants of the permission checks, for the top of protected operations."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._checker = permission_checker

    async def check_role_perms(self, perms: PermissionsInput, role_id: str | None) -> None:
        """Raise Forbidden if the role does not have the permissions."""
        if not await self._checker.role_can(perms, role_id):
            logger.info("Access denied for role %s", role_id)
            raise Forbidden("forbidden")

    async def check_user_perms(self, perms: PermissionsInput, user_id: str | None) -> None:
        """Raise Forbidden if the user does not have the permissions."""
        if not await self._checker.user_can(perms, user_id):
            logger.info("Access denied for user %s", user_id)
            raise Forbidden("forbidden")
