from enum import Enum

class Role(str, Enum):
    admin = "admin"
    manager = "manager"
    member = "member"

class Resource(str, Enum):
    organizations = "organizations"
    projects = "projects"
    tasks = "tasks"
    users = "users"

class Action(str, Enum):
    create = "create"
    read = "read"
    update = "update"
    delete = "delete"
    manage = "manage"
    invite = "invite"
    assign_role = "assign_role"
    remove = "remove"
    add_to_project = "add_to_project"
    assign = "assign"
    change_status = "change_status"
    switch = "switch"
    update_own = "update_own"

# board column order
class TaskStatus(str, Enum):
    backlog = "backlog"
    todo = "todo"
    in_progress = "in-progress"
    review = "review"
    completed = "completed"
    blocked = "blocked"

class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"

class TriageBucket(str, Enum):
    overdue = "overdue"
    urgent_soon = "urgent-soon"
    normal = "normal"

class SuggestedBucket(str, Enum):
    backlog = "backlog"
    by_status = "by-status"

class MoveWarning(str, Enum):
    none = "none"
    warn_urgent = "warn-urgent"
    error_overdue = "error-overdue"
