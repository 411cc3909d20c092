"""Domain entities."""

from rolegate.domain.entities.role import Role
from rolegate.domain.entities.user_role import UserRoleAssignment

__all__ = [
    "Role",
    "UserRoleAssignment",
]
