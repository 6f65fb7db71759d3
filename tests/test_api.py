def roles(org: str | None = None, team: str | None = None) -> dict[str, str]:
    h = {}
    if org is not None:
        h["x-org-role"] = org
    if team is not None:
        h["x-team-role"] = team
    return h

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

def test_my_permissions_defaults_to_member(client):
    r = client.get("/permissions/me")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["role"] == "member"
    assert body["permissions"]["tasks"] == ["read", "update_own"]
    assert body["capabilities"]["is_member"] is True

def test_my_permissions_team_role_overrides_org_role(client):
    r = client.get("/permissions/me", headers=roles(org="member", team="Manager"))
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["role"] == "manager"
    assert body["org_role"] == "member"
    assert body["team_role"] == "Manager"
    assert body["permissions"]["organizations"] == ["read", "switch"]
    assert body["capabilities"]["can_change_project_status"] is True
    assert body["capabilities"]["can_create_projects"] is False

def test_my_permissions_admin(client):
    r = client.get("/permissions/me", headers=roles(org="ADMIN"))
    body = r.json()
    assert body["role"] == "admin"
    assert body["permissions"]["users"] == ["assign_role", "invite", "read", "remove", "update"]

def test_check_permission(client):
    r = client.post("/permissions/check", json={"role": "manager", "resource": "projects", "action": "delete"})
    assert r.status_code == 200, r.text
    assert r.json() == {"role": "manager", "allowed": False}

    r = client.post("/permissions/check", json={"role": "member", "resource": "tasks", "action": "update_own"})
    assert r.json()["allowed"] is True

def test_check_permission_unknown_values_deny(client):
    r = client.post("/permissions/check", json={"role": "bogus", "resource": "invoices", "action": "pay"})
    assert r.status_code == 200, r.text
    assert r.json() == {"role": "member", "allowed": False}

def test_check_permission_uses_team_role(client):
    r = client.post(
        "/permissions/check",
        json={"role": "member", "team_role": "admin", "resource": "tasks", "action": "delete"},
    )
    assert r.json() == {"role": "admin", "allowed": True}

def test_resolve_role(client):
    team = {"id": "t1", "name": "core", "members": [{"user_id": "u1", "role": "manager"}]}

    r = client.post("/permissions/resolve", json={"org_role": "member", "user_id": "u1", "team": team})
    assert r.status_code == 200, r.text
    assert r.json() == {"role": "manager", "team_role": "manager"}

    r = client.post("/permissions/resolve", json={"org_role": "admin", "user_id": "u2", "team": team})
    assert r.json() == {"role": "admin", "team_role": None}

def test_classify(client):
    payload = {
        "today": "2024-03-15",
        "tasks": [
            {"_id": "t1", "title": "ship", "status": "todo", "dueDate": "2024-03-15T09:00:00.000Z"},
            {"_id": "t2", "title": "late", "status": "review", "dueDate": "2024-03-13"},
            {"_id": "t3", "title": "done", "status": "completed", "dueDate": "2024-03-14"},
            {"_id": "t4", "title": "someday", "status": "backlog"},
        ],
    }
    r = client.post("/triage/classify", json=payload)
    assert r.status_code == 200, r.text
    by_id = {c["id"]: c for c in r.json()}

    assert by_id["t1"]["days_until_due"] == 0
    assert by_id["t1"]["urgent_soon"] is True
    assert by_id["t1"]["tier"] == "urgent-soon"
    assert by_id["t1"]["suggested_bucket"] == "backlog"
    assert by_id["t1"]["column"] == "backlog"
    assert by_id["t1"]["status"] == "todo"

    assert by_id["t2"]["overdue"] is True
    assert by_id["t2"]["suggested_bucket"] == "backlog"
    assert by_id["t2"]["column"] == "backlog"
    assert by_id["t2"]["status"] == "review"

    assert by_id["t3"]["overdue"] is False
    assert by_id["t3"]["suggested_bucket"] == "by-status"
    assert by_id["t3"]["tier"] == "normal"

    assert by_id["t4"]["days_until_due"] is None
    assert by_id["t4"]["column"] == "backlog"

def test_classify_rejects_malformed_due_date(client):
    r = client.post("/triage/classify", json={"tasks": [{"status": "todo", "dueDate": "not-a-date"}]})
    assert r.status_code == 422

def test_board(client):
    payload = {
        "today": "2024-03-15",
        "tasks": [
            {"id": "a", "status": "todo", "due_date": "2024-03-01"},
            {"id": "b", "status": "todo"},
            {"id": "c", "status": "completed", "due_date": "2024-03-01"},
        ],
    }
    r = client.post("/triage/board", json=payload)
    assert r.status_code == 200, r.text
    cols = r.json()["columns"]
    assert [t["id"] for t in cols["backlog"]] == ["a"]
    assert [t["id"] for t in cols["todo"]] == ["b"]
    assert [t["id"] for t in cols["completed"]] == ["c"]
    assert cols["backlog"][0]["due_date"] == "2024-03-01"

def test_move_warning(client):
    task = {"id": "t1", "status": "backlog", "dueDate": "2024-03-14"}
    r = client.post("/triage/move-warning", json={"task": task, "proposed_status": "todo", "today": "2024-03-15"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["warning"] == "error-overdue"
    assert "overdue" in body["message"]
    assert body["allowed"] is True

    task["dueDate"] = "2024-03-15"
    r = client.post("/triage/move-warning", json={"task": task, "proposed_status": "todo", "today": "2024-03-15"})
    assert r.json()["warning"] == "warn-urgent"
    assert r.json()["allowed"] is True

    task["dueDate"] = "2024-03-20"
    r = client.post("/triage/move-warning", json={"task": task, "proposed_status": "todo", "today": "2024-03-15"})
    assert r.json() == {"warning": "none", "message": None, "allowed": True}

def test_project_report(client):
    payload = {
        "today": "2024-03-15",
        "tasks": [
            {"status": "completed"},
            {"status": "review"},
            {"status": "in-progress"},
            {"status": "blocked", "dueDate": "2024-03-10"},
        ],
    }
    r = client.post("/reports/project", json=payload)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["completion_percent"] == 36.25
    assert body["completion_display"] == 36
    assert body["overdue"] == 1
    assert body["backlog"] == 1
    assert body["stats"]["total"] == 4

def test_project_report_empty(client):
    r = client.post("/reports/project", json={"tasks": []})
    assert r.status_code == 200, r.text
    assert r.json()["completion_percent"] == 0
    assert r.json()["stats"]["total"] == 0

def test_work_summary(client):
    r = client.post("/reports/work-summary", json={"tasks": [{"status": "completed"}, {"status": "todo"}]})
    assert r.status_code == 200, r.text
    assert r.json() == {"total": 2, "completed": 1, "in_progress": 0, "todo": 1, "completion_rate": 50}

def test_project_report_tolerates_unknown_priority(client):
    payload = {
        "today": "2024-03-15",
        "tasks": [
            {"status": "todo", "priority": "critical", "dueDate": "2024-03-20"},
            {"status": "review", "priority": None},
        ],
    }
    r = client.post("/reports/project", json=payload)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["stats"]["total"] == 2
    assert body["completion_percent"] == 17.5

def test_null_status_counts_only_in_total(client):
    r = client.post("/reports/project", json={"tasks": [{"status": None}, {"status": "completed"}]})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["stats"]["total"] == 2
    assert body["stats"]["completed"] == 1
    assert sum(v for k, v in body["stats"].items() if k != "total") == 1
    assert body["completion_percent"] == 50.0

def test_today_accepts_iso_timestamp(client):
    payload = {
        "today": "2024-03-15T10:00:00Z",
        "tasks": [{"id": "t1", "status": "todo", "dueDate": "2024-03-16"}],
    }
    r = client.post("/triage/classify", json=payload)
    assert r.status_code == 200, r.text
    assert r.json()[0]["days_until_due"] == 1

    task = {"id": "t1", "status": "backlog", "dueDate": "2024-03-14"}
    r = client.post(
        "/triage/move-warning",
        json={"task": task, "proposed_status": "todo", "today": "2024-03-15T23:30:00.000Z"},
    )
    assert r.status_code == 200, r.text
    assert r.json()["warning"] == "error-overdue"
