from fastapi import APIRouter, Depends

from workpax.models.enums import Resource
from workpax.rbac.context import RoleContext, get_role_context
from workpax.rbac.perms import allowed_actions, capabilities, has_permission
from workpax.schemas.permissions import (
    PermissionCheckIn,
    PermissionCheckOut,
    PermissionsOut,
    RoleResolveIn,
    RoleResolveOut,
)

router = APIRouter(prefix="/permissions", tags=["permissions"])

@router.get("/me", response_model=PermissionsOut)
def my_permissions(ctx: RoleContext = Depends(get_role_context)) -> PermissionsOut:
    return PermissionsOut(
        role=ctx.role,
        org_role=ctx.org_role,
        team_role=ctx.team_role,
        permissions={
            r.value: sorted(a.value for a in allowed_actions(ctx.role, r))
            for r in Resource
        },
        capabilities=capabilities(ctx.role),
    )

@router.post("/check", response_model=PermissionCheckOut)
def check_permission(payload: PermissionCheckIn) -> PermissionCheckOut:
    # unknown resource/action is a deny, not a validation error
    ctx = RoleContext(org_role=payload.role, team_role=payload.team_role)
    return PermissionCheckOut(
        role=ctx.role,
        allowed=has_permission(ctx.role, payload.resource, payload.action),
    )

@router.post("/resolve", response_model=RoleResolveOut)
def resolve_role(payload: RoleResolveIn) -> RoleResolveOut:
    ctx = RoleContext.resolve(payload.org_role, team=payload.team, user_id=payload.user_id)
    return RoleResolveOut(role=ctx.role, team_role=ctx.team_role)
