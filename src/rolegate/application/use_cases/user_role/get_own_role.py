"""Get own role use case - session-scoped role query."""

from rolegate.application.dto.own_role import OwnRole


class GetOwnRoleUseCase:
    """Fetch the caller's assignment record and assigned role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str | None) -> OwnRole | None:
        """Return None when the caller is unknown or has no assignment record."""
        if not user_id:
            return None

        async with self._uow_factory() as uow:
            assignment = await uow.user_roles.get(user_id)
            if assignment is None:
                return None
            role = None
            if assignment.role_id is not None:
                role = await uow.roles.get_by_id(assignment.role_id)
            return OwnRole(assignment=assignment, role=role)
