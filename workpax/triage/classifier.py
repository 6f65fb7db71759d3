"""
Due-date triage for task snapshots.

Everything here is a pure function of a task snapshot and "today". Callers
classifying a batch should capture today() once and pass it to every call so
the whole batch lands in consistent buckets.
"""
from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, datetime
from zoneinfo import ZoneInfo

from workpax.config import settings
from workpax.models.enums import MoveWarning, SuggestedBucket, TaskStatus, TriageBucket
from workpax.schemas.tasks import TaskSnapshot

URGENT_WITHIN_DAYS = 1

STATUS_KEYS = frozenset(s.value for s in TaskStatus)

PROGRESS_WEIGHTS: dict[str, float] = {
    TaskStatus.completed.value: 1.0,
    TaskStatus.review.value: 0.30,
    TaskStatus.in_progress.value: 0.15,
    TaskStatus.todo.value: 0.05,
    TaskStatus.backlog.value: 0.0,
    TaskStatus.blocked.value: 0.0,
}

MOVE_WARNING_MESSAGES: dict[MoveWarning, str | None] = {
    MoveWarning.none: None,
    MoveWarning.warn_urgent: "This task is urgent (due within 1 day). Complete it soon!",
    MoveWarning.error_overdue: "This task is overdue! Complete it urgently or update the due date.",
}

def today(tz: str | None = None) -> date:
    return datetime.now(ZoneInfo(tz or settings.timezone)).date()

def as_day(now: date | datetime | None) -> date:
    """Truncate to a calendar day; None reads the clock."""
    if now is None:
        return today()
    if isinstance(now, datetime):
        return now.date()
    return now

def days_until_due(task: TaskSnapshot, now: date | datetime | None = None) -> int | None:
    if task.due_date is None:
        return None
    # both sides are whole days, so the difference needs no ceil
    return (task.due_date - as_day(now)).days

def is_overdue(task: TaskSnapshot, now: date | datetime | None = None) -> bool:
    days = days_until_due(task, now)
    return days is not None and days < 0 and task.status != TaskStatus.completed

def is_urgent_soon(task: TaskSnapshot, now: date | datetime | None = None) -> bool:
    days = days_until_due(task, now)
    return days is not None and days <= URGENT_WITHIN_DAYS

def suggested_bucket(task: TaskSnapshot, now: date | datetime | None = None) -> SuggestedBucket:
    # due within a day (overdue included) is proposed for backlog; completed work never is
    if task.status == TaskStatus.backlog:
        return SuggestedBucket.backlog
    if task.status != TaskStatus.completed and is_urgent_soon(task, now):
        return SuggestedBucket.backlog
    return SuggestedBucket.by_status

def board_column(task: TaskSnapshot, now: date | datetime | None = None) -> str:
    if suggested_bucket(task, now) is SuggestedBucket.backlog:
        return TaskStatus.backlog.value
    return task.status

def triage_bucket(task: TaskSnapshot, now: date | datetime | None = None) -> TriageBucket:
    if is_overdue(task, now):
        return TriageBucket.overdue
    if task.status != TaskStatus.completed and is_urgent_soon(task, now):
        return TriageBucket.urgent_soon
    return TriageBucket.normal

def move_status_warning(
    task: TaskSnapshot,
    proposed_status: str,
    now: date | datetime | None = None,
) -> MoveWarning:
    # advisory: callers show the warning and let the move through
    if proposed_status == TaskStatus.backlog:
        return MoveWarning.none
    days = days_until_due(task, now)
    if days is None or days > URGENT_WITHIN_DAYS:
        return MoveWarning.none
    if days < 0:
        return MoveWarning.error_overdue
    return MoveWarning.warn_urgent

def status_progress_weight(status: str | None) -> float:
    if not isinstance(status, str):
        return 0.0
    return PROGRESS_WEIGHTS.get(status, 0.0)

def project_completion_percent(tasks: Iterable[TaskSnapshot]) -> float:
    """
    Weighted completion of a project in [0, 100].

    Each task owns an equal share of 100 and contributes share * weight of its
    status, so in-flight work earns partial credit. fsum keeps the total
    independent of task order. Round only when displaying.
    """
    tasks = list(tasks)
    if not tasks:
        return 0.0
    share = 100 / len(tasks)
    total = math.fsum(share * status_progress_weight(t.status) for t in tasks)
    return min(total, 100.0)

def task_stats(tasks: Iterable[TaskSnapshot]) -> dict[str, int]:
    tasks = list(tasks)
    stats = {s.value: 0 for s in TaskStatus}
    # unknown statuses count toward total but no bucket
    stats["total"] = len(tasks)
    for t in tasks:
        if t.status in STATUS_KEYS:
            stats[t.status] += 1
    return stats
