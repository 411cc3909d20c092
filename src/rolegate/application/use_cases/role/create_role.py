"""Create role use case."""

import logging
from uuid import uuid4

from rolegate.domain.entities import Role
from rolegate.domain.exceptions import ValidationError
from rolegate.domain.value_objects import PermissionsInput, normalize_permissions

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a role with a set of permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        permissions: PermissionsInput,
        role_id: str | None = None,
    ) -> Role:
        """Create role. Raises DuplicateRole if the id is or was in use."""
        perms = normalize_permissions(permissions)
        if role_id is None:
            role_id = uuid4().hex
        elif not isinstance(role_id, str) or not role_id:
            raise ValidationError("Role id must be a non-empty string")

        async with self._uow_factory() as uow:
            role = await uow.roles.create(Role(id=role_id, permissions=perms))

        logger.info("Created role %s with %d permissions", role.id, len(role.permissions))
        return role
