from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from workpax.models.enums import MoveWarning, SuggestedBucket, TaskPriority, TaskStatus, TriageBucket

def calendar_day(v):
    # the api sends ISO timestamps; only the calendar day matters
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return None
        if "T" in v or " " in v:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
    return v

class TaskSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    title: str = ""
    # plain strings: unknown statuses and priorities must not sink a batch
    status: str = TaskStatus.todo.value
    priority: str = TaskPriority.medium.value
    due_date: date | None = Field(default=None, validation_alias=AliasChoices("due_date", "dueDate"))

    @field_validator("status", mode="before")
    @classmethod
    def _plain_status(cls, v):
        if v is None:
            return ""
        if isinstance(v, TaskStatus):
            return v.value
        return v

    @field_validator("priority", mode="before")
    @classmethod
    def _plain_priority(cls, v):
        if v is None:
            return TaskPriority.medium.value
        if isinstance(v, TaskPriority):
            return v.value
        return v

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_day(cls, v):
        return calendar_day(v)

class TaskBatchIn(BaseModel):
    tasks: list[TaskSnapshot] = []
    today: date | None = None

    @field_validator("today", mode="before")
    @classmethod
    def _today_day(cls, v):
        return calendar_day(v)

class TaskClassificationOut(BaseModel):
    id: str | None
    title: str
    status: str
    days_until_due: int | None
    overdue: bool
    urgent_soon: bool
    suggested_bucket: SuggestedBucket
    column: str
    tier: TriageBucket

class BoardOut(BaseModel):
    columns: dict[str, list[TaskSnapshot]]

class MoveWarningIn(BaseModel):
    task: TaskSnapshot
    proposed_status: str
    today: date | None = None

    @field_validator("today", mode="before")
    @classmethod
    def _today_day(cls, v):
        return calendar_day(v)

class MoveWarningOut(BaseModel):
    warning: MoveWarning
    message: str | None
    # advisory only, a move is never refused
    allowed: bool = True
