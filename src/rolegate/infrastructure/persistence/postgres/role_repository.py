"""PostgreSQL role repository implementation.

Deleted roles keep their row with ``deleted_at`` set, so an id is never
handed out twice.
"""

from psycopg import AsyncConnection

from rolegate.domain.entities import Role
from rolegate.domain.exceptions import DuplicateRole, NotFound


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: str) -> Role | None:
        """Get role by id."""
        perms = await self.get_permissions(role_id)
        if perms is None:
            return None
        return Role(id=role_id, permissions=perms)

    async def list_all(self) -> list[Role]:
        """List all roles, ordered by id."""
        cur = await self._conn.execute(
            "SELECT r.id, rp.permission FROM role r "
            "LEFT JOIN role_permission rp ON rp.role_id = r.id "
            "WHERE r.deleted_at IS NULL ORDER BY r.id"
        )
        rows = await cur.fetchall()
        grouped: dict[str, set[str]] = {}
        for role_id, permission in rows:
            perms = grouped.setdefault(role_id, set())
            if permission is not None:
                perms.add(permission)
        return [Role(id=k, permissions=frozenset(v)) for k, v in grouped.items()]

    async def exists(self, role_id: str) -> bool:
        """Check role exists.

        The row is share-locked until commit, so a concurrent delete waits
        for an assignment made in the same transaction.
        """
        cur = await self._conn.execute(
            "SELECT 1 FROM role WHERE id = %s AND deleted_at IS NULL FOR SHARE",
            (role_id,),
        )
        return await cur.fetchone() is not None

    async def get_permissions(self, role_id: str) -> frozenset[str] | None:
        """Get permissions of role, None if there is no such role."""
        cur = await self._conn.execute(
            "SELECT rp.permission FROM role r "
            "LEFT JOIN role_permission rp ON rp.role_id = r.id "
            "WHERE r.id = %s AND r.deleted_at IS NULL",
            (role_id,),
        )
        rows = await cur.fetchall()
        if not rows:
            return None
        return frozenset(r[0] for r in rows if r[0] is not None)

    async def create(self, role: Role) -> Role:
        """Create role."""
        cur = await self._conn.execute(
            "INSERT INTO role (id, created_at) VALUES (%s, now()) "
            "ON CONFLICT (id) DO NOTHING RETURNING id",
            (role.id,),
        )
        if await cur.fetchone() is None:
            raise DuplicateRole(f"Role id already used: {role.id}")
        await self._insert_permissions(role)
        return role

    async def create_or_get(self, role_id: str, permissions: frozenset[str]) -> Role:
        """Return live role with this id, creating it if the id was never used."""
        existing = await self.get_by_id(role_id)
        if existing is not None:
            return existing
        return await self.create(Role(id=role_id, permissions=permissions))

    async def delete(self, role_id: str) -> None:
        """Soft delete role."""
        cur = await self._conn.execute(
            "UPDATE role SET deleted_at = now() WHERE id = %s AND deleted_at IS NULL",
            (role_id,),
        )
        if cur.rowcount == 0:
            raise NotFound(f"Role not found: {role_id}")
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s",
            (role_id,),
        )

    async def _insert_permissions(self, role: Role) -> None:
        if not role.permissions:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_permission (role_id, permission) VALUES (%s, %s)",
                [(role.id, p) for p in sorted(role.permissions)],
            )
