"""Repository ports."""

from rolegate.application.ports.repositories.role_repository import RoleRepository
from rolegate.application.ports.repositories.user_role_repository import (
    UserRoleRepository,
)

__all__ = [
    "RoleRepository",
    "UserRoleRepository",
]
