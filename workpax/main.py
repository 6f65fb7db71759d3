from fastapi import FastAPI

from workpax.config import settings
from workpax.logging_setup import setup_logging
from workpax.routes.health import router as health_router
from workpax.routes.permissions import router as permissions_router
from workpax.routes.reports import router as reports_router
from workpax.routes.triage import router as triage_router

def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title="workpax", version="0.1.0")
    app.include_router(health_router)
    app.include_router(permissions_router)
    app.include_router(triage_router)
    app.include_router(reports_router)
    return app

app = create_app()
