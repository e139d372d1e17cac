from __future__ import annotations

from hostel_leave.main import create_app


def test_app_starts_with_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")

    app = create_app()
    client = app.test_client()

    assert app.config["TESTING"] is True
    assert client.get("/leave").status_code == 401
    assert {"create_leave", "list_leaves", "get_leave", "decide_leave"} <= set(app.view_functions)
