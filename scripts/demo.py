from __future__ import annotations

import os
import time
from datetime import date, timedelta

import requests
from rich import print

BASE = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")

def post(path: str, *, json: dict | None = None, headers: dict | None = None) -> requests.Response:
    h = {"content-type": "application/json"}
    if headers:
        h.update(headers)
    return requests.post(f"{BASE}{path}", headers=h, json=json, timeout=10)

def get(path: str, *, headers: dict | None = None) -> requests.Response:
    return requests.get(f"{BASE}{path}", headers=headers or {}, timeout=10)

def wait_ready(timeout_s: float = 30.0) -> None:
    deadline = time.time() + timeout_s
    last_err: Exception | None = None

    while time.time() < deadline:
        try:
            r = get("/health")
            if r.status_code == 200:
                return
        except requests.RequestException as e:
            last_err = e
        time.sleep(0.5)

    if last_err:
        raise RuntimeError(f"api not ready after {timeout_s}s (last error: {last_err})")
    raise RuntimeError(f"api not ready after {timeout_s}s")

def sample_tasks(today: date) -> list[dict]:
    def due(days: int) -> str:
        return (today + timedelta(days=days)).isoformat()

    return [
        {"id": "t1", "title": "write release notes", "status": "backlog"},
        {"id": "t2", "title": "fix login redirect", "status": "todo", "dueDate": due(-2)},
        {"id": "t3", "title": "review board filters", "status": "review", "dueDate": due(1)},
        {"id": "t4", "title": "migrate team roles", "status": "in-progress", "dueDate": due(6)},
        {"id": "t5", "title": "ship invites", "status": "completed", "dueDate": due(-3)},
        {"id": "t6", "title": "vendor contract", "status": "blocked"},
    ]

def main() -> None:
    print("[bold]demo: roles -> permissions -> board -> move warning -> report[/bold]")

    wait_ready()
    print("[green]ready ok[/green]")

    today = date.today()
    tasks = sample_tasks(today)

    for org_role, team_role in (("admin", None), ("member", "manager"), ("bogus", None)):
        headers = {"x-org-role": org_role}
        if team_role:
            headers["x-team-role"] = team_role
        r = get("/permissions/me", headers=headers)
        r.raise_for_status()
        body = r.json()
        print(f"org={org_role} team={team_role} -> [cyan]{body['role']}[/cyan] tasks={body['permissions']['tasks']}")

    r = post("/triage/board", json={"tasks": tasks, "today": today.isoformat()})
    r.raise_for_status()
    for column, items in r.json()["columns"].items():
        print(f"  {column:<12} {[t['title'] for t in items]}")

    r = post(
        "/triage/move-warning",
        json={"task": tasks[1], "proposed_status": "in-progress", "today": today.isoformat()},
    )
    r.raise_for_status()
    w = r.json()
    print(f"move t2 -> in-progress: [yellow]{w['warning']}[/yellow] {w['message'] or ''}")

    r = post("/reports/project", json={"tasks": tasks, "today": today.isoformat()})
    r.raise_for_status()
    report = r.json()
    print(f"completion: {report['completion_display']}% overdue={report['overdue']} stats={report['stats']}")
    print("[bold green]demo complete[/bold green]")

if __name__ == "__main__":
    main()
