"""Authorization engine - decides allow/deny from role and assignment stores."""

import logging

from rolegate.application.ports import CurrentIdentityProvider, UnitOfWork
from rolegate.domain.value_objects import PermissionsInput, normalize_permissions

logger = logging.getLogger(__name__)


class AuthorizationEngine:
    """Checks permissions against the role store and the user role index.

    All requested permissions must be held by the role (conjunctive match).
    An empty request is always granted, even for an unknown role or user.
    Missing roles, missing users and malformed user ids resolve to a deny,
    never to an error. Checks hold no shared mutable state and may run
    concurrently.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        identity_provider: CurrentIdentityProvider | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._identity = identity_provider

    async def role_can(self, perms: PermissionsInput, role_id: str | None) -> bool:
        """Check if role has all the permissions."""
        requested = normalize_permissions(perms)
        if not requested:
            return True
        if not isinstance(role_id, str):
            return False

        async with self._uow_factory() as uow:
            return await self._role_grants(uow, requested, role_id)

    async def user_can(self, perms: PermissionsInput, user_id: str | None) -> bool:
        """Check if the user's assigned role has all the permissions."""
        requested = normalize_permissions(perms)
        if not requested:
            return True
        if not isinstance(user_id, str) or not user_id:
            return False

        async with self._uow_factory() as uow:
            role_id = await uow.user_roles.get_role_id(user_id)
            if role_id is None:
                logger.debug("User %s has no role", user_id)
                return False
            return await self._role_grants(uow, requested, role_id)

    async def current_user_can(self, perms: PermissionsInput) -> bool:
        """Check permissions for the caller resolved by the identity provider."""
        user_id = self._identity.current_user_id() if self._identity else None
        return await self.user_can(perms, user_id)

    async def _role_grants(
        self, uow: UnitOfWork, requested: frozenset[str], role_id: str
    ) -> bool:
        held = await uow.roles.get_permissions(role_id)
        if held is None:
            logger.debug("Role %s not found", role_id)
            return False
        return held.issuperset(requested)
