from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import date, datetime

from workpax.models.enums import SuggestedBucket, TaskStatus
from workpax.schemas.reports import ProjectReportOut, WorkSummaryOut
from workpax.schemas.tasks import TaskSnapshot
from workpax.triage.classifier import (
    as_day,
    board_column,
    is_overdue,
    project_completion_percent,
    suggested_bucket,
    task_stats,
)

logger = logging.getLogger(__name__)

def display_percent(value: float) -> int:
    # round half up, like the browser's Math.round
    return int(math.floor(value + 0.5))

def group_board(
    tasks: Iterable[TaskSnapshot],
    now: date | datetime | None = None,
) -> dict[str, list[TaskSnapshot]]:
    day = as_day(now)
    columns: dict[str, list[TaskSnapshot]] = {s.value: [] for s in TaskStatus}
    skipped = 0
    for t in tasks:
        col = board_column(t, day)
        if col in columns:
            columns[col].append(t)
        else:
            skipped += 1
    if skipped:
        logger.debug("board: %d task(s) with unknown status left off the board", skipped)
    return columns

def backlog_tasks(tasks: Iterable[TaskSnapshot], now: date | datetime | None = None) -> list[TaskSnapshot]:
    day = as_day(now)
    return [t for t in tasks if suggested_bucket(t, day) is SuggestedBucket.backlog]

def work_summary(tasks: Iterable[TaskSnapshot]) -> WorkSummaryOut:
    stats = task_stats(tasks)
    total = stats["total"]
    completed = stats[TaskStatus.completed.value]
    rate = display_percent(completed / total * 100) if total else 0
    return WorkSummaryOut(
        total=total,
        completed=completed,
        in_progress=stats[TaskStatus.in_progress.value],
        todo=stats[TaskStatus.todo.value],
        completion_rate=rate,
    )

def project_report(tasks: Iterable[TaskSnapshot], now: date | datetime | None = None) -> ProjectReportOut:
    tasks = list(tasks)
    day = as_day(now)
    completion = project_completion_percent(tasks)
    logger.debug("project report over %d task(s) for %s", len(tasks), day.isoformat())
    return ProjectReportOut(
        stats=task_stats(tasks),
        completion_percent=completion,
        completion_display=display_percent(completion),
        overdue=sum(1 for t in tasks if is_overdue(t, day)),
        backlog=len(backlog_tasks(tasks, day)),
    )
