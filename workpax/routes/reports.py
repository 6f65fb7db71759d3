from fastapi import APIRouter

from workpax.schemas.reports import ProjectReportOut, WorkSummaryOut
from workpax.schemas.tasks import TaskBatchIn
from workpax.triage.classifier import as_day
from workpax.triage.reports import project_report, work_summary

router = APIRouter(prefix="/reports", tags=["reports"])

@router.post("/project", response_model=ProjectReportOut)
def report_project(payload: TaskBatchIn) -> ProjectReportOut:
    return project_report(payload.tasks, as_day(payload.today))

@router.post("/work-summary", response_model=WorkSummaryOut)
def report_work_summary(payload: TaskBatchIn) -> WorkSummaryOut:
    return work_summary(payload.tasks)
