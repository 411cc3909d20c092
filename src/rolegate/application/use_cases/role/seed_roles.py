"""Seed roles use case - bootstrap roles and their holders."""

import logging
from collections.abc import Iterable, Mapping

from rolegate.domain.entities import Role, UserRoleAssignment
from rolegate.domain.exceptions import RoleNotFound
from rolegate.domain.value_objects import normalize_permissions

logger = logging.getLogger(__name__)


class SeedRolesUseCase:
    """Ensure configured roles exist and assign configured users to them.

    Roles that already exist are left as they are; their permissions are not
    overwritten.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        roles: Mapping[str, Iterable[str]],
        assignments: Mapping[str, str] | None = None,
    ) -> list[Role]:
        seeded: list[Role] = []
        async with self._uow_factory() as uow:
            for role_id, perms in roles.items():
                seeded.append(
                    await uow.roles.create_or_get(role_id, normalize_permissions(perms))
                )
            for user_id, role_id in (assignments or {}).items():
                if not await uow.roles.exists(role_id):
                    raise RoleNotFound(role_id)
                await uow.user_roles.set_role(
                    UserRoleAssignment(user_id=user_id, role_id=role_id)
                )
        logger.info(
            "Seeded %d roles and %d assignments", len(seeded), len(assignments or {})
        )
        return seeded
