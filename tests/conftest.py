from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from workpax.main import create_app
from workpax.schemas.tasks import TaskSnapshot

TODAY = date(2024, 3, 15)

@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())

@pytest.fixture()
def today() -> date:
    return TODAY

@pytest.fixture()
def make_task():
    # due is an offset in days from TODAY, None for no due date
    def _make(status: str = "todo", due: int | None = None, **kw) -> TaskSnapshot:
        due_date = TODAY + timedelta(days=due) if due is not None else None
        return TaskSnapshot(status=status, due_date=due_date, **kw)

    return _make
