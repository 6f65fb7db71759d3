from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from workpax.models.enums import Action, Resource, Role

logger = logging.getLogger(__name__)

_TABLE: dict[Role, dict[Resource, set[Action]]] = {
    Role.admin: {
        Resource.organizations: {Action.create, Action.read, Action.update, Action.delete, Action.manage},
        Resource.projects: {Action.create, Action.read, Action.update, Action.delete, Action.manage},
        Resource.tasks: {Action.create, Action.read, Action.update, Action.delete, Action.assign},
        Resource.users: {Action.invite, Action.assign_role, Action.remove, Action.read, Action.update},
    },
    Role.manager: {
        Resource.organizations: {Action.read, Action.switch},
        Resource.projects: {Action.read, Action.update, Action.manage, Action.change_status},
        Resource.tasks: {Action.create, Action.read, Action.update, Action.delete, Action.assign},
        Resource.users: {Action.add_to_project, Action.read},
    },
    Role.member: {
        Resource.organizations: {Action.read},
        Resource.projects: {Action.read},
        Resource.tasks: {Action.read, Action.update_own},
        Resource.users: {Action.read},
    },
}

def _freeze(
    table: Mapping[Role, Mapping[Resource, Iterable[Action]]],
) -> Mapping[Role, Mapping[Resource, frozenset[Action]]]:
    # every role must carry every resource, even if the action set is empty
    frozen: dict[Role, Mapping[Resource, frozenset[Action]]] = {}
    for role in Role:
        by_resource = table.get(role)
        if by_resource is None:
            raise RuntimeError(f"permission table missing role: {role.value}")
        entry: dict[Resource, frozenset[Action]] = {}
        for resource in Resource:
            if resource not in by_resource:
                raise RuntimeError(f"permission table missing {role.value}:{resource.value}")
            entry[resource] = frozenset(by_resource[resource])
        frozen[role] = MappingProxyType(entry)
    return MappingProxyType(frozen)

PERMS = _freeze(_TABLE)

def _key(value: Any) -> str | None:
    if isinstance(value, Role):
        return value.value
    if isinstance(value, str):
        return value.strip().lower()
    return None

def normalize_role(role: Role | str | None) -> Role:
    """Lower-case a raw role value; anything missing or unknown becomes member."""
    key = _key(role)
    if key:
        try:
            return Role(key)
        except ValueError:
            pass
    if role not in (None, ""):
        logger.debug("unrecognised role %r, treating as member", role)
    return Role.member

def _coerce(enum_cls, value: Any):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None

def allowed_actions(role: Role | str | None, resource: Resource | str) -> frozenset[Action]:
    res = _coerce(Resource, resource)
    if res is None:
        return frozenset()
    return PERMS[normalize_role(role)][res]

def has_permission(role: Role | str | None, resource: Resource | str, action: Action | str) -> bool:
    act = _coerce(Action, action)
    if act is None:
        return False
    return act in allowed_actions(role, resource)

def has_role(role: Role | str | None, allowed_roles: Role | str | Iterable[Role | str]) -> bool:
    if allowed_roles is None:
        return False
    if isinstance(allowed_roles, str):
        allowed_roles = [allowed_roles]
    allowed = {_key(r) for r in allowed_roles}
    return normalize_role(role).value in allowed

# derived predicates, generated from these two declarations
_ROLE_CHECKS: dict[str, tuple[Role, ...]] = {
    "is_admin": (Role.admin,),
    "is_manager": (Role.manager,),
    "is_member": (Role.member,),
    "is_manager_or_admin": (Role.manager, Role.admin),
}

_PERMISSION_CHECKS: dict[str, tuple[Resource, Action]] = {
    "can_manage_organizations": (Resource.organizations, Action.manage),
    "can_switch_organizations": (Resource.organizations, Action.switch),
    "can_create_projects": (Resource.projects, Action.create),
    "can_change_project_status": (Resource.projects, Action.change_status),
    "can_assign_tasks": (Resource.tasks, Action.assign),
    "can_invite_users": (Resource.users, Action.invite),
    "can_assign_roles": (Resource.users, Action.assign_role),
    "can_remove_users": (Resource.users, Action.remove),
    "can_add_users_to_project": (Resource.users, Action.add_to_project),
}

def _role_predicate(name: str, allowed: tuple[Role, ...]) -> Callable[[Role | str | None], bool]:
    def check(role: Role | str | None) -> bool:
        return has_role(role, allowed)

    check.__name__ = name
    return check

def _permission_predicate(name: str, resource: Resource, action: Action) -> Callable[[Role | str | None], bool]:
    def check(role: Role | str | None) -> bool:
        return has_permission(role, resource, action)

    check.__name__ = name
    return check

PREDICATES: dict[str, Callable[[Role | str | None], bool]] = {
    **{name: _role_predicate(name, roles) for name, roles in _ROLE_CHECKS.items()},
    **{name: _permission_predicate(name, *pair) for name, pair in _PERMISSION_CHECKS.items()},
}

is_admin = PREDICATES["is_admin"]
is_manager = PREDICATES["is_manager"]
is_member = PREDICATES["is_member"]
is_manager_or_admin = PREDICATES["is_manager_or_admin"]
can_manage_organizations = PREDICATES["can_manage_organizations"]
can_switch_organizations = PREDICATES["can_switch_organizations"]
can_create_projects = PREDICATES["can_create_projects"]
can_change_project_status = PREDICATES["can_change_project_status"]
can_assign_tasks = PREDICATES["can_assign_tasks"]
can_invite_users = PREDICATES["can_invite_users"]
can_assign_roles = PREDICATES["can_assign_roles"]
can_remove_users = PREDICATES["can_remove_users"]
can_add_users_to_project = PREDICATES["can_add_users_to_project"]

def capabilities(role: Role | str | None) -> dict[str, bool]:
    return {name: check(role) for name, check in PREDICATES.items()}

def can_render(
    role: Role | str | None,
    *,
    roles: Role | str | Iterable[Role | str] | None = None,
    resource: Resource | str | None = None,
    action: Action | str | None = None,
) -> bool:
    """
    Decide whether a gated UI element should be shown.

    A role list takes precedence over a resource/action pair. With neither,
    the element is ungated.
    """
    if roles:
        return has_role(role, roles)
    if resource and action:
        return has_permission(role, resource, action)
    return True
