"""In-memory role repository."""

from rolegate.domain.entities import Role
from rolegate.domain.exceptions import DuplicateRole, NotFound


class InMemoryRoleRepository:
    """Role repository over a dict of immutable Role values.

    Ids of deleted roles are remembered and never accepted again.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Role] = {}
        self._deleted: set[str] = set()

    async def get_by_id(self, role_id: str) -> Role | None:
        return self._by_id.get(role_id)

    async def list_all(self) -> list[Role]:
        return [self._by_id[k] for k in sorted(self._by_id)]

    async def exists(self, role_id: str) -> bool:
        return role_id in self._by_id

    async def get_permissions(self, role_id: str) -> frozenset[str] | None:
        role = self._by_id.get(role_id)
        return role.permissions if role else None

    async def create(self, role: Role) -> Role:
        if role.id in self._by_id or role.id in self._deleted:
            raise DuplicateRole(f"Role id already used: {role.id}")
        self._by_id[role.id] = role
        return role

    async def create_or_get(self, role_id: str, permissions: frozenset[str]) -> Role:
        existing = self._by_id.get(role_id)
        if existing is not None:
            return existing
        return await self.create(Role(id=role_id, permissions=permissions))

    async def delete(self, role_id: str) -> None:
        if self._by_id.pop(role_id, None) is None:
            raise NotFound(f"Role not found: {role_id}")
        self._deleted.add(role_id)
