from __future__ import annotations

import io
from datetime import date

from openpyxl import load_workbook

from src.timesheet_system.timesheet_system.reports.excel_exporter import XLSX_MIMETYPE


def test_save_time_entry_returns_available_hours(client, entries_repo):
    res = client.post("/save-time-entry", json={"userId": 1, "date": "2024-01-02", "komatsu": "4", "mtu": 2})

    assert res.status_code == 200
    assert res.get_json() == {"success": True, "message": "Time entry saved successfully", "available_hours": 3.5}
    assert entries_repo.count() == 1


def test_save_time_entry_over_budget_is_ok(client):
    res = client.post("/save-time-entry", json={"userId": 1, "date": "2024-01-02", "volvo": 12})

    assert res.status_code == 200
    assert res.get_json()["available_hours"] == 7.0


def test_save_time_entry_accepts_form_posts(client, entries_repo):
    res = client.post("/save-time-entry", data={"userId": "5", "date": "2024-01-03", "omnion": "1.5"})

    assert res.status_code == 200
    assert entries_repo.get_for_user_and_date(5, date(2024, 1, 3)).hours["omnion"] == 1.5


def test_save_time_entry_validation(client):
    res = client.post("/save-time-entry", json={"userId": 1, "date": "02/01/2024"})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_save_time_entry_store_failure_is_generic_500(broken_client):
    res = broken_client.post("/save-time-entry", json={"userId": 1, "date": "2024-01-02"})

    assert res.status_code == 500
    assert res.get_json() == {"success": False, "message": "Failed to save time entry"}


def test_preview_reports_advisory_state(client, entries_repo):
    res = client.post("/time-entry/preview", json={"userId": 1, "date": "2024-01-02", "komatsu": 8})

    body = res.get_json()["preview"]
    assert body["available_hours"] == 1.5
    assert body["advisory_available_hours"] == 0.0
    assert body["advisory_state"] == "exhausted"
    assert entries_repo.count() == 0


def test_get_and_list_time_entries(client):
    client.post("/save-time-entry", json={"userId": 1, "date": "2024-01-02", "komatsu": 1})
    client.post("/save-time-entry", json={"userId": 1, "date": "2024-01-04", "komatsu": 2})

    listed = client.get("/time-entries/1").get_json()["entries"]
    assert [e["date"] for e in listed] == ["2024-01-04", "2024-01-02"]

    one = client.get("/time-entry/1/2024-01-04").get_json()["entry"]
    assert one["komatsu"] == 2.0
    assert client.get("/time-entry/1/2024-01-09").get_json() == {"success": True, "entry": {}}
    assert client.get("/time-entry/1/not-a-date").status_code == 400


def test_register_login_logout(client):
    res = client.post("/register", json={"ps_number": "PS9", "password": "pw", "name": "Nia"})
    assert res.get_json()["success"] is True

    dup = client.post("/register", json={"ps_number": "PS9", "password": "pw", "name": "Nia"})
    assert dup.status_code == 400
    assert dup.get_json()["message"] == "User already exists"

    login = client.post("/login", json={"ps_number": "PS9", "password": "pw"})
    assert login.get_json()["user"]["name"] == "Nia"

    bad = client.post("/login", json={"ps_number": "PS9", "password": "nope"})
    assert bad.status_code == 400
    assert bad.get_json()["message"] == "Invalid credentials"

    assert client.post("/logout").get_json()["success"] is True


def test_admin_routes_require_admin_session(client):
    for path in ("/admin/users", "/admin/users-data", "/admin/project-distribution", "/admin/export-excel"):
        assert client.get(path).status_code == 403
    assert client.post("/admin-login", json={"password": "wrong"}).status_code == 400


def test_admin_users_data_and_distribution(admin_client, users_repo):
    asha = users_repo.add("PS1", "Asha")
    users_repo.add("PS2", "Ravi")
    admin_client.post("/save-time-entry", json={"userId": asha.user_id, "date": "2024-01-02", "komatsu": 2})
    admin_client.post("/save-time-entry", json={"userId": asha.user_id, "date": "2024-01-03", "komatsu": 3})

    data = admin_client.get("/admin/users-data").get_json()["data"]
    assert [(r["user_name"], r["date"]) for r in data] == [
        ("Asha", "2024-01-03"),
        ("Asha", "2024-01-02"),
        ("Ravi", None),
    ]

    dist = admin_client.get("/admin/project-distribution").get_json()["distribution"]
    assert [(d["ps_number"], d["komatsu"], d["entry_count"]) for d in dist] == [("PS1", 5.0, 2), ("PS2", 0.0, 0)]

    filtered = admin_client.get("/admin/project-distribution?user=PS2").get_json()["distribution"]
    assert [d["ps_number"] for d in filtered] == ["PS2"]


def test_admin_export_excel(admin_client, users_repo):
    asha = users_repo.add("PS1", "Asha")
    admin_client.post("/save-time-entry", json={"userId": asha.user_id, "date": "2024-01-02", "komatsu": 2})

    res = admin_client.get("/admin/export-excel")

    assert res.status_code == 200
    assert res.mimetype == XLSX_MIMETYPE
    assert "time_entries_export.xlsx" in res.headers["Content-Disposition"]
    ws = load_workbook(io.BytesIO(res.data)).active
    assert ws.cell(row=2, column=1).value == "Asha"


def test_admin_report_store_failure_is_500(broken_client):
    broken_client.post("/admin-login", json={"password": "admin-test"})

    res = broken_client.get("/admin/users-data")

    assert res.status_code == 500
    assert res.get_json() == {"success": False, "message": "Database error"}


def test_admin_delete_user(admin_client, users_repo, entries_repo):
    asha = users_repo.add("PS1", "Asha")
    admin_client.post("/save-time-entry", json={"userId": asha.user_id, "date": "2024-01-02", "komatsu": 2})

    res = admin_client.delete(f"/admin/users/{asha.user_id}")

    assert res.get_json() == {"success": True, "message": "User deleted successfully", "deletedEntries": 1}
    assert entries_repo.count() == 0
    assert admin_client.delete(f"/admin/users/{asha.user_id}").status_code == 404


def test_admin_projects_crud(admin_client):
    created = admin_client.post("/admin/projects", json={"name": "Komatsu"}).get_json()
    pid = created["projectId"]

    assert admin_client.put(f"/admin/projects/{pid}/toggle").get_json()["success"] is True
    projects = admin_client.get("/admin/projects").get_json()["projects"]
    assert projects[0]["is_active"] is False

    assert admin_client.post("/admin/projects", json={"name": " "}).status_code == 400
    assert admin_client.delete(f"/admin/projects/{pid}").get_json()["success"] is True
    assert admin_client.delete(f"/admin/projects/{pid}").status_code == 404


def test_network_info(client):
    body = client.get("/network-info").get_json()

    assert body["port"]
    assert f"http://localhost:{body['port']}" in body["urls"]


def test_admin_login_non_ascii_password_is_rejected(client):
    res = client.post("/admin-login", json={"password": "pässwörd"})

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "message": "Invalid admin password"}


def test_register_and_login_with_numeric_fields(client):
    res = client.post("/register", json={"ps_number": 1001, "password": 1234, "name": "Nia"})
    assert res.status_code == 200

    login = client.post("/login", json={"ps_number": 1001, "password": 1234})
    assert login.status_code == 200
    assert login.get_json()["user"]["ps_number"] == "1001"

    bad = client.post("/login", json={"ps_number": 1001, "password": 99})
    assert bad.status_code == 400
    assert bad.get_json()["message"] == "Invalid credentials"


def test_save_time_entry_whole_float_user_id(client, entries_repo):
    res = client.post("/save-time-entry", json={"userId": 7.0, "date": "2024-01-02", "mtu": 1})
    assert res.status_code == 200
    assert entries_repo.get_for_user_and_date(7, date(2024, 1, 2)) is not None

    bad = client.post("/save-time-entry", json={"userId": 7.5, "date": "2024-01-02"})
    assert bad.status_code == 400
    assert "malformed" in bad.get_json()["message"]


def test_users_data_rows_share_one_shape(admin_client, users_repo):
    asha = users_repo.add("PS1", "Asha")
    users_repo.add("PS2", "Ravi")
    admin_client.post("/save-time-entry", json={"userId": asha.user_id, "date": "2024-01-02", "komatsu": 2})

    data = admin_client.get("/admin/users-data").get_json()["data"]

    assert set(data[0]) == set(data[1])
    assert data[1]["komatsu"] is None
