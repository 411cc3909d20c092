"""Role read use cases."""

from rolegate.domain.entities import Role


class GetRoleUseCase:
    """Fetch a single role by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: str) -> Role | None:
        async with self._uow_factory() as uow:
            return await uow.roles.get_by_id(role_id)


class ListRolesUseCase:
    """Fetch all roles."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Role]:
        async with self._uow_factory() as uow:
            return await uow.roles.list_all()
