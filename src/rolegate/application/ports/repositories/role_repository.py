"""Role repository port."""

from typing import Protocol

from rolegate.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def exists(self, role_id: str) -> bool: ...

    async def get_permissions(self, role_id: str) -> frozenset[str] | None: ...

    async def create(self, role: Role) -> Role: ...

    async def create_or_get(self, role_id: str, permissions: frozenset[str]) -> Role: ...

    async def delete(self, role_id: str) -> None: ...
