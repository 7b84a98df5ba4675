from __future__ import annotations

import pytest

from src.office_presence.office_presence.core.exceptions import StoreReadError, StoreWriteError
from src.office_presence.office_presence.container import assemble_container
from src.office_presence.office_presence.main import create_app


@pytest.fixture
def client(monkeypatch, users_repo, store, holidays_provider):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble_container(
        users_repo=users_repo,
        month_store=store,
        holiday_provider=holidays_provider,
        holiday_region="PL",
        locale="en",
    )
    app = create_app(container)
    return app.test_client()


def _signup(client, email="a@example.com", password="secret1"):
    return client.post("/api/auth/signup", json={"email": email, "password": password})


def test_month_requires_login(client):
    resp = client.get("/api/months/2025-06")

    assert resp.status_code == 401


def test_signup_login_and_me(client):
    assert _signup(client).status_code == 201
    assert client.get("/api/auth/me").get_json()["user"]["email"] == "a@example.com"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401

    resp = client.post("/api/auth/login", json={"email": "a@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Wrong email or password"

    resp = client.post("/api/auth/login", json={"email": "a@example.com", "password": "secret1"})
    assert resp.status_code == 200


def test_month_view_and_toggle(client, store):
    _signup(client)

    data = client.get("/api/months/2025-06").get_json()
    assert data["stats"]["workdays"] == 20
    assert data["stats"]["requiredDays"] == 8
    assert (1, "2025-06") in store.docs

    data = client.post("/api/months/2025-06/days/2/toggle").get_json()
    assert data["marks"] == [{"day": 2, "status": "present"}]
    assert data["stats"]["presentDays"] == 1

    data = client.post("/api/months/2025-06/days/2/toggle").get_json()
    assert data["marks"] == [{"day": 2, "status": "excused"}]
    assert data["stats"]["workdays"] == 19


@pytest.mark.parametrize("path", ["/api/months/2025-06/days/31/toggle", "/api/months/2025-06/days/0/toggle", "/api/months/2025-13/days/1/toggle", "/api/months/2025-06/days/x/toggle"])
def test_toggle_rejects_bad_input(client, path):
    _signup(client)

    assert client.post(path).status_code == 400


def test_settings_are_clamped(client, store):
    _signup(client)

    data = client.put("/api/months/2025-06/settings", json={"requiredPercent": 150, "employmentFraction": 50}).get_json()

    assert data["requiredPercent"] == 100
    assert data["employmentFraction"] == 50
    assert store.docs[(1, "2025-06")]["requiredPercent"] == 100


def test_settings_reject_non_integer(client):
    _signup(client)

    resp = client.put("/api/months/2025-06/settings", json={"requiredPercent": "lots"})

    assert resp.status_code == 400


def test_store_failures(client, store):
    _signup(client)
    store.fail_reads = True

    view = client.get("/api/months/2025-06")
    assert view.status_code == 200
    assert view.get_json()["warnings"]

    assert client.post("/api/months/2025-06/days/2/toggle").status_code == 503


class UnavailableUsers:
    def get_by_email(self, email: str):
        raise StoreReadError("Could not read user accounts")

    def create_user(self, *, email: str, password_hash: str) -> int:
        raise StoreWriteError("Could not create the account")


def test_auth_reports_store_outage_as_message(monkeypatch, store, holidays_provider):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble_container(
        users_repo=UnavailableUsers(),
        month_store=store,
        holiday_provider=holidays_provider,
    )
    client = create_app(container).test_client()

    login = client.post("/api/auth/login", json={"email": "a@example.com", "password": "secret1"})
    signup = _signup(client)

    assert login.status_code == 401
    assert "temporarily unavailable" in login.get_json()["message"]
    assert signup.status_code == 400
    assert "temporarily unavailable" in signup.get_json()["message"]


def test_corrupt_stored_month_shows_defaults(client, store):
    _signup(client)
    store.docs[(1, "2025-06")] = {"marks": [{"day": 2, "status": "remote"}]}

    view = client.get("/api/months/2025-06")

    assert view.status_code == 200
    assert view.get_json()["requiredPercent"] == 40
    assert view.get_json()["warnings"]
    assert client.post("/api/months/2025-06/days/3/toggle").status_code == 503
