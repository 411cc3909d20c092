"""Role entity for RBAC."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Role:
    """Role - a bundle of permission strings under an opaque id."""

    id: str
    permissions: frozenset[str] = field(default_factory=frozenset)
