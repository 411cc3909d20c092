"""Permission set normalization.

Call sites may request a single permission (``"edit"``) or a collection of
permissions (``["edit", "publish"]``). Both are normalized at the boundary to
a ``frozenset[str]``; anything else is rejected with ``InvalidPermissions``.
Matching is exact-string and case-sensitive.
"""

from collections.abc import Iterable, Mapping

from rolegate.domain.exceptions import InvalidPermissions

PermissionsInput = str | Iterable[str]


def normalize_permissions(perms: PermissionsInput) -> frozenset[str]:
    """Return requested permissions as a frozenset of strings."""
    if isinstance(perms, str):
        return frozenset((perms,))
    if isinstance(perms, (bytes, bytearray, Mapping)) or not isinstance(perms, Iterable):
        raise InvalidPermissions("Permissions must be an Array of strings")
    items = tuple(perms)
    if not all(isinstance(p, str) for p in items):
        raise InvalidPermissions("Permissions must be an Array of strings")
    return frozenset(items)
