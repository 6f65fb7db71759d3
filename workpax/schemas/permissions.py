from pydantic import BaseModel

from workpax.models.enums import Role

class TeamMember(BaseModel):
    user_id: str
    role: str | None = None

class Team(BaseModel):
    id: str
    name: str = ""
    members: list[TeamMember] = []

class PermissionCheckIn(BaseModel):
    role: str | None = None
    team_role: str | None = None
    resource: str
    action: str

class PermissionCheckOut(BaseModel):
    role: Role
    allowed: bool

class PermissionsOut(BaseModel):
    role: Role
    org_role: str | None
    team_role: str | None
    permissions: dict[str, list[str]]
    capabilities: dict[str, bool]

class RoleResolveIn(BaseModel):
    org_role: str | None = None
    user_id: str | None = None
    team: Team | None = None

class RoleResolveOut(BaseModel):
    role: Role
    team_role: str | None
