from pydantic import BaseModel

class ProjectReportOut(BaseModel):
    stats: dict[str, int]
    completion_percent: float
    completion_display: int
    overdue: int
    backlog: int

class WorkSummaryOut(BaseModel):
    total: int
    completed: int
    in_progress: int
    todo: int
    completion_rate: int
