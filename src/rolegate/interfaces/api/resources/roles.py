"""Roles API resources."""

import falcon.asgi

from rolegate.application.ports import PermissionGate
from rolegate.application.use_cases.role.create_role import CreateRoleUseCase
from rolegate.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolegate.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from rolegate.domain.exceptions import (
    DuplicateRole,
    Forbidden,
    InvalidPermissions,
    NotFound,
    ValidationError,
)
from rolegate.interfaces.api.resources.serializers import role_to_dict


class RolesResource:
    """GET/POST /v1/roles - list all roles and create a role."""

    def __init__(
        self,
        list_roles: ListRolesUseCase,
        create_role: CreateRoleUseCase,
        access_gate: PermissionGate,
        admin_permission: str,
    ) -> None:
        self._list = list_roles
        self._create = create_role
        self._gate = access_gate
        self._admin_permission = admin_permission

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles. Roles are not secret; no identity required."""
        roles = await self._list.execute()
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        if not isinstance(body, dict) or "permissions" not in body:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: 'permissions'"}
            return

        try:
            await self._gate.check_user_perms(self._admin_permission, user.user_id)
            role = await self._create.execute(body["permissions"], role_id=body.get("id"))
            resp.media = role_to_dict(role)
            resp.status = falcon.HTTP_201
        except Forbidden:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except (InvalidPermissions, ValidationError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except DuplicateRole as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}


class RoleResource:
    """GET/DELETE /v1/roles/{role_id} - fetch or delete a single role."""

    def __init__(
        self,
        get_role: GetRoleUseCase,
        delete_role: DeleteRoleUseCase,
        access_gate: PermissionGate,
        admin_permission: str,
    ) -> None:
        self._get = get_role
        self._delete = delete_role
        self._gate = access_gate
        self._admin_permission = admin_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        """Get role by id. No identity required."""
        role = await self._get.execute(role_id)
        if role is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        """Delete role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._gate.check_user_perms(self._admin_permission, user.user_id)
            await self._delete.execute(role_id)
            resp.status = falcon.HTTP_204
        except Forbidden:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
