"""PostgreSQL user role repository implementation."""

from psycopg import AsyncConnection

from rolegate.domain.entities import UserRoleAssignment


class PostgresUserRoleRepository:
    """User role repository implementation - one row per user."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, user_id: str) -> UserRoleAssignment | None:
        """Get assignment record for user."""
        cur = await self._conn.execute(
            "SELECT user_id, role_id FROM user_role WHERE user_id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return UserRoleAssignment(user_id=r[0], role_id=r[1])

    async def get_role_id(self, user_id: str) -> str | None:
        """Get role id of user, None for no record or a cleared role."""
        assignment = await self.get(user_id)
        return assignment.role_id if assignment else None

    async def set_role(self, assignment: UserRoleAssignment) -> None:
        """Replace assignment for user in a single statement."""
        await self._conn.execute(
            "INSERT INTO user_role (user_id, role_id, updated_at) VALUES (%s, %s, now()) "
            "ON CONFLICT (user_id) DO UPDATE "
            "SET role_id = EXCLUDED.role_id, updated_at = EXCLUDED.updated_at",
            (assignment.user_id, assignment.role_id),
        )
