"""User role assignment API resource."""

import falcon.asgi

from rolegate.application.ports import PermissionGate
from rolegate.application.use_cases.user_role.set_user_role import SetUserRoleUseCase
from rolegate.domain.exceptions import Forbidden, RoleNotFound, ValidationError
from rolegate.interfaces.api.resources.serializers import assignment_to_dict


class UserRoleResource:
    """PUT /v1/users/{user_id}/role - assign a role (or null) to a user."""

    def __init__(
        self,
        set_user_role: SetUserRoleUseCase,
        access_gate: PermissionGate,
        admin_permission: str,
    ) -> None:
        self._set_role = set_user_role
        self._gate = access_gate
        self._admin_permission = admin_permission

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Set user's role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        if not isinstance(body, dict) or "role_id" not in body:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: 'role_id'"}
            return
        role_id = body["role_id"]
        if role_id is not None and not isinstance(role_id, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "role_id must be a string or null"}
            return

        try:
            await self._gate.check_user_perms(self._admin_permission, user.user_id)
            assignment = await self._set_role.execute(user_id, role_id)
            resp.media = assignment_to_dict(assignment)
            resp.status = falcon.HTTP_200
        except Forbidden:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except RoleNotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
