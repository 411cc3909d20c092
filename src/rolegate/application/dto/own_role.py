"""Own role DTO - result of the session-scoped role query."""

from dataclasses import dataclass

from rolegate.domain.entities import Role, UserRoleAssignment


@dataclass
class OwnRole:
    """Caller's assignment (role id only) and the role it points to, if any."""

    assignment: UserRoleAssignment
    role: Role | None = None
