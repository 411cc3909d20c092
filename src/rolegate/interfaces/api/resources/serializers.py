"""Response bodies for roles and assignments."""

from rolegate.domain.entities import Role, UserRoleAssignment


def role_to_dict(role: Role) -> dict:
    return {"id": role.id, "permissions": sorted(role.permissions)}


def assignment_to_dict(assignment: UserRoleAssignment) -> dict:
    return {"id": assignment.user_id, "role_id": assignment.role_id}
