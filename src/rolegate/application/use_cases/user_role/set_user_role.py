"""Set user role use case."""

import logging

from rolegate.domain.entities import UserRoleAssignment
from rolegate.domain.exceptions import RoleNotFound, ValidationError

logger = logging.getLogger(__name__)


class SetUserRoleUseCase:
    """Assign a role (or no role) to a user.

    The existence check and the write share one unit of work. A failed check
    leaves the user's prior assignment untouched. Passing ``role_id=None``
    clears the assignment, which reads back as "no permissions".
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, role_id: str | None) -> UserRoleAssignment:
        """Set user's role. Raises RoleNotFound if role_id names no role."""
        if not isinstance(user_id, str) or not user_id:
            raise ValidationError("User id must be a non-empty string")

        async with self._uow_factory() as uow:
            if role_id is not None and not await uow.roles.exists(role_id):
                raise RoleNotFound(role_id)
            assignment = UserRoleAssignment(user_id=user_id, role_id=role_id)
            await uow.user_roles.set_role(assignment)

        logger.info("Set role of user %s to %s", user_id, role_id)
        return assignment
