"""Permission checker ports - RBAC authorization."""

from typing import Protocol

from rolegate.domain.value_objects import PermissionsInput


class PermissionChecker(Protocol):
    """Port for boolean permission decisions."""

    async def role_can(self, perms: PermissionsInput, role_id: str | None) -> bool: ...

    async def user_can(self, perms: PermissionsInput, user_id: str | None) -> bool: ...

    async def current_user_can(self, perms: PermissionsInput) -> bool: ...


class PermissionGate(Protocol):
    """Port for checks that raise Forbidden on denial."""

    async def check_role_perms(self, perms: PermissionsInput, role_id: str | None) -> None: ...

    async def check_user_perms(self, perms: PermissionsInput, user_id: str | None) -> None: ...
