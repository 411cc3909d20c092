"""User role assignment entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRoleAssignment:
    """Assignment - user (by id) mapped to zero or one role."""

    user_id: str
    role_id: str | None = None
