from fastapi import Header

from workpax.models.enums import Role
from workpax.rbac.perms import normalize_role
from workpax.schemas.permissions import Team

def team_role_for(team: Team | None, user_id: str | None) -> str | None:
    if team is None or not user_id:
        return None
    for m in team.members:
        if m.user_id == user_id:
            return m.role or None
    return None

def effective_role(org_role: Role | str | None, team_role: Role | str | None = None) -> Role:
    # a selected team's role wins over the org-level role
    if isinstance(team_role, str) and team_role.strip():
        return normalize_role(team_role)
    return normalize_role(org_role)

class RoleContext:
    def __init__(self, org_role: str | None, team_role: str | None = None):
        self.org_role = org_role
        self.team_role = team_role
        self.role = effective_role(org_role, team_role)

    @classmethod
    def resolve(cls, org_role: str | None, team: Team | None = None, user_id: str | None = None) -> "RoleContext":
        return cls(org_role=org_role, team_role=team_role_for(team, user_id))

def get_role_context(
    x_org_role: str | None = Header(default=None),
    x_team_role: str | None = Header(default=None),
) -> RoleContext:
    return RoleContext(org_role=x_org_role, team_role=x_team_role)
