"""In-memory user role repository."""

from rolegate.domain.entities import UserRoleAssignment


class InMemoryUserRoleRepository:
    """User role index over a dict; each write replaces one key."""

    def __init__(self) -> None:
        self._by_user: dict[str, UserRoleAssignment] = {}

    async def get(self, user_id: str) -> UserRoleAssignment | None:
        return self._by_user.get(user_id)

    async def get_role_id(self, user_id: str) -> str | None:
        assignment = self._by_user.get(user_id)
        return assignment.role_id if assignment else None

    async def set_role(self, assignment: UserRoleAssignment) -> None:
        self._by_user[assignment.user_id] = assignment
