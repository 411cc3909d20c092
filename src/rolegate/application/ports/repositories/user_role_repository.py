"""User role repository port."""

from typing import Protocol

from rolegate.domain.entities import UserRoleAssignment


class UserRoleRepository(Protocol):
    """Port for the user id -> role id mapping."""

    async def get(self, user_id: str) -> UserRoleAssignment | None: ...

    async def get_role_id(self, user_id: str) -> str | None: ...

    async def set_role(self, assignment: UserRoleAssignment) -> None: ...
