"""Domain value objects."""

from rolegate.domain.value_objects.permission_set import (
    PermissionsInput,
    normalize_permissions,
)

__all__ = [
    "PermissionsInput",
    "normalize_permissions",
]
