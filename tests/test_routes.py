from __future__ import annotations

from datetime import date, time

from src.timecard_system.timecard_system.core.exceptions import StorageError
from src.timecard_system.timecard_system.punches.model import PunchRecord


def _add(client, name: str) -> int:
    resp = client.post("/employees", json={"name": name})
    assert resp.status_code == 200
    return resp.get_json()["employeeId"]


def test_list_employees(client):
    _add(client, "Bob")
    _add(client, "Alice")

    resp = client.get("/employees")

    assert resp.status_code == 200
    assert [e["name"] for e in resp.get_json()["employees"]] == ["Alice", "Bob"]
    assert resp.get_json()["employees"][0]["active"] is True


def test_add_employee_twice_is_conflict(client):
    _add(client, "Alice")

    resp = client.post("/employees", json={"name": "Alice"})

    assert resp.status_code == 409
    assert "already exists" in resp.get_json()["error"]


def test_add_employee_requires_name(client):
    assert client.post("/employees", json={"name": "  "}).status_code == 400
    assert client.post("/employees", json={}).status_code == 400
    assert client.post("/employees", data="not json", content_type="application/json").status_code == 400


def test_delete_employee(client):
    employee_id = _add(client, "Alice")

    resp = client.delete(f"/employees?id={employee_id}")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "deletedRows": 1}
    assert client.get("/employees").get_json()["employees"] == []


def test_delete_employee_requires_id(client):
    assert client.delete("/employees").status_code == 400
    assert client.delete("/employees?id=abc").status_code == 400


def test_status_without_punches_is_out(client):
    _add(client, "Bob")

    resp = client.get("/punch?employee=Bob")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "OUT"}


def test_punch_in_then_lunch(client):
    _add(client, "Alice")

    resp = client.post("/punch", json={"employee": "Alice", "type": "IN"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["status"] == "IN"
    punch_id = body["punchId"]

    resp = client.post("/punch", json={"employee": "Alice", "type": "LUNCH_START"})
    assert resp.get_json()["status"] == "LUNCH"
    assert resp.get_json()["punchId"] == punch_id

    assert client.get("/punch?employee=Alice").get_json() == {"status": "LUNCH"}


def test_punch_validation(client):
    _add(client, "Alice")

    assert client.post("/punch", json={"employee": "Alice"}).status_code == 400
    assert client.post("/punch", json={"type": "IN"}).status_code == 400
    assert client.post("/punch", json={"employee": "Alice", "type": "NAP"}).status_code == 400
    assert client.get("/punch").status_code == 400


def test_punch_for_inactive_employee_is_not_found(client, punches_repo):
    employee_id = _add(client, "Alice")
    client.delete(f"/employees?id={employee_id}")

    assert client.post("/punch", json={"employee": "Alice", "type": "IN"}).status_code == 404
    assert client.get("/punch?employee=Alice").status_code == 404
    assert client.post("/punch", json={"employee": "Nobody", "type": "IN"}).status_code == 404
    assert punches_repo.all() == []


def test_timecard(client, punches_repo):
    _add(client, "Alice")
    punches_repo.seed(
        PunchRecord(
            record_id=1,
            employee_name="Alice",
            work_date=date(2024, 6, 10),
            day_of_week="Monday",
            punch_in_time=time(9, 0),
            punch_out_time=time(17, 0),
            total_hours=8.0,
        )
    )

    resp = client.get("/timecard?employee=Alice&weekEnding=2024-06-15")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["totalHours"] == 8.0
    assert body["weekEnding"] == "2024-06-15"
    assert body["employeeName"] == "Alice"
    assert body["timecard"][0]["punch_out_time"] == "5:00 PM"
    assert body["timecard"][0]["is_off_day"] is False


def test_timecard_default_week_ending_is_a_saturday(client):
    _add(client, "Alice")

    body = client.get("/timecard?employee=Alice").get_json()

    assert date.fromisoformat(body["weekEnding"]).weekday() == 5
    assert body["timecard"] == []
    assert body["totalHours"] == 0


def test_timecard_errors(client):
    _add(client, "Alice")
    assert client.get("/timecard").status_code == 400
    assert client.get("/timecard?employee=Ghost").status_code == 404
    assert client.get("/timecard?employee=Alice&weekEnding=tomorrow").status_code == 400


def test_off_day_and_csv_export(client):
    _add(client, "Alice")

    resp = client.post("/offday", json={"employeeName": "Alice", "date": "2024-06-10"})
    assert resp.status_code == 200
    assert resp.get_json()["success"] is True

    resp = client.get("/export/csv?employee=Alice&weekEnding=2024-06-15")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.headers["Content-Disposition"].startswith("attachment")
    assert "timecard_Alice_2024-06-15.csv" in resp.headers["Content-Disposition"]
    lines = resp.get_data(as_text=True).split("\n")
    assert lines[1] == '"Alice",2024-06-10,Monday,,,,,0.00,OFF'


def test_off_day_validation(client):
    _add(client, "Alice")
    assert client.post("/offday", json={"employeeName": "Alice"}).status_code == 400
    assert client.post("/offday", json={"employeeName": "Alice", "date": "10 June"}).status_code == 400


def test_export_requires_employee(client):
    assert client.get("/export/csv").status_code == 400


def test_time_entries(client):
    resp = client.post("/time-entries", json={"employeeName": "Alice", "date": "2024-06-10", "hours": 8, "lunchTaken": True})
    assert resp.status_code == 200
    assert resp.get_json()["entryId"] == 1

    assert client.post("/time-entries", json={"employeeName": "Alice", "date": "2024-06-10"}).status_code == 400
    assert client.post("/time-entries", json={"employeeName": "Alice", "date": "2024-06-10", "hours": -2}).status_code == 400

    body = client.get("/time-entries/weekly").get_json()
    assert set(body) == {"entries", "weekStart", "weekEnding"}


def test_health_ok(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["success"] is True


def test_health_reports_missing_tables(client, tables):
    tables.remove("time_entries")

    resp = client.get("/health")

    assert resp.status_code == 500
    assert "time_entries" in resp.get_json()["error"]


def test_storage_errors_surface_as_500(client, employees_repo, monkeypatch):
    def boom():
        raise StorageError("Database connection failed: Can't connect to MySQL server")

    monkeypatch.setattr(employees_repo, "list_active", boom)

    resp = client.get("/employees")

    assert resp.status_code == 500
    assert "Database connection failed" in resp.get_json()["error"]


def test_csv_export_with_non_latin_name(client):
    _add(client, "李雷")

    resp = client.get("/export/csv", query_string={"employee": "李雷", "weekEnding": "2024-06-15"})

    assert resp.status_code == 200
    disposition = resp.headers["Content-Disposition"]
    disposition.encode("latin-1")
    assert "filename*=UTF-8''timecard_%E6%9D%8E%E9%9B%B7_2024-06-15.csv" in disposition
    assert resp.get_data(as_text=True).startswith("Employee Name,")


def test_time_entry_lunch_taken_must_be_boolean(client, time_entries_repo):
    body = {"employeeName": "Alice", "date": "2024-06-10", "hours": 8, "lunchTaken": "false"}

    resp = client.post("/time-entries", json=body)

    assert resp.status_code == 400
    assert time_entries_repo.entries == []

    body["lunchTaken"] = False
    assert client.post("/time-entries", json=body).status_code == 200
    assert time_entries_repo.entries[0].lunch_taken is False


def test_add_employee_with_overlong_name(client):
    resp = client.post("/employees", json={"name": "x" * 101})

    assert resp.status_code == 400
    assert "at most 100" in resp.get_json()["error"]


def test_timecard_includes_seven_day_slots(client):
    _add(client, "Alice")

    body = client.get("/timecard?employee=Alice&weekEnding=2024-06-15").get_json()

    assert body["days"][0]["date"] == "2024-06-09"
    assert len(body["days"]) == 7
    assert body["formattedTotalHours"] == "0:00"
