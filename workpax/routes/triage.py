from fastapi import APIRouter

from workpax.schemas.tasks import (
    BoardOut,
    MoveWarningIn,
    MoveWarningOut,
    TaskBatchIn,
    TaskClassificationOut,
)
from workpax.triage.classifier import (
    MOVE_WARNING_MESSAGES,
    as_day,
    board_column,
    days_until_due,
    is_overdue,
    is_urgent_soon,
    move_status_warning,
    suggested_bucket,
    triage_bucket,
)
from workpax.triage.reports import group_board

router = APIRouter(prefix="/triage", tags=["triage"])

@router.post("/classify", response_model=list[TaskClassificationOut])
def classify_tasks(payload: TaskBatchIn) -> list[TaskClassificationOut]:
    # one "today" for the whole batch
    day = as_day(payload.today)
    return [
        TaskClassificationOut(
            id=t.id,
            title=t.title,
            status=t.status,
            days_until_due=days_until_due(t, day),
            overdue=is_overdue(t, day),
            urgent_soon=is_urgent_soon(t, day),
            suggested_bucket=suggested_bucket(t, day),
            column=board_column(t, day),
            tier=triage_bucket(t, day),
        )
        for t in payload.tasks
    ]

@router.post("/board", response_model=BoardOut)
def board(payload: TaskBatchIn) -> BoardOut:
    return BoardOut(columns=group_board(payload.tasks, as_day(payload.today)))

@router.post("/move-warning", response_model=MoveWarningOut)
def move_warning(payload: MoveWarningIn) -> MoveWarningOut:
    w = move_status_warning(payload.task, payload.proposed_status, as_day(payload.today))
    return MoveWarningOut(warning=w, message=MOVE_WARNING_MESSAGES[w])
