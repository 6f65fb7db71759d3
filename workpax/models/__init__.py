from workpax.models.enums import (
    Action,
    MoveWarning,
    Resource,
    Role,
    SuggestedBucket,
    TaskPriority,
    TaskStatus,
    TriageBucket,
)

__all__ = [
    "Action",
    "MoveWarning",
    "Resource",
    "Role",
    "SuggestedBucket",
    "TaskPriority",
    "TaskStatus",
    "TriageBucket",
]
