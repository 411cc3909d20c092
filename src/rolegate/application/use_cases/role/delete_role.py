"""Delete role use case."""

import logging

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a role. Existing assignments are left pointing at it."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: str) -> None:
        """Delete role by id. Raises NotFound if there is no such role."""
        async with self._uow_factory() as uow:
            await uow.roles.delete(role_id)
        logger.info("Deleted role %s", role_id)
