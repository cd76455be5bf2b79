"""
Tests for the Flask dashboard and the controller runner behind it.

The runner is real (background loop thread); only the backend client is faked.
"""

import time

import pytest

from dashboard.config import DashboardSettings
from dashboard.controller import DashboardController
from dashboard.runtime import ControllerRunner
from dashboard.service import create_app
from shared.resources import ALL_KINDS, ResourceKind
from tests.conftest import FakeDataServiceClient


SETTINGS = DashboardSettings(
    api_base_url="http://localhost:5500/api",
    host="127.0.0.1",
    port=5000,
    fetch_timeout_seconds=5.0,
    secret_key="test-secret",
)


@pytest.fixture
def fake_backend():
    return FakeDataServiceClient({ResourceKind.USERS: [{"_id": "1", "name": "Bob"}]})


@pytest.fixture
def runner(fake_backend):
    runner = ControllerRunner(DashboardController(fake_backend), call_timeout=5.0)
    yield runner
    runner.stop()


@pytest.fixture
def client(runner):
    app = create_app(SETTINGS, runner=runner)
    app.config["TESTING"] = True
    return app.test_client()


def _wait_loaded(client, timeout=5.0):
    deadline = time.time() + timeout
    state = client.get("/api/state").get_json()
    while any(r["loading"] for r in state["resources"].values()):
        if time.time() > deadline:
            raise AssertionError("fetches did not finish")
        time.sleep(0.02)
        state = client.get("/api/state").get_json()
    return state


def test_logged_out_page_shows_login_form(client):
    response = client.get("/")

    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert "Login (Mock)" in page
    assert "panel-users" not in page
    assert "everyone using this dashboard shares one login" in page


def test_login_loads_panels(client, fake_backend):
    response = client.post("/login", data={"username": "alice"})
    assert response.status_code == 302

    state = _wait_loaded(client)

    assert state["session"] == {"authenticated": True, "identity": "alice"}
    assert state["resources"]["users"]["items"] == [{"_id": "1", "name": "Bob"}]
    assert sorted(k.value for k in fake_backend.calls) == sorted(k.value for k in ALL_KINDS)

    page = client.get("/").get_data(as_text=True)
    assert "Welcome back, <strong>alice</strong>!" in page
    assert "&#34;name&#34;: &#34;Bob&#34;" in page or "&quot;name&quot;: &quot;Bob&quot;" in page
    assert "No customers found or logged out." in page


def test_blank_login_stays_logged_out_without_message(client, fake_backend):
    client.post("/login", data={"username": "   "})

    state = client.get("/api/state").get_json()
    assert state["session"]["authenticated"] is False
    assert fake_backend.calls == []
    assert "Error" not in client.get("/").get_data(as_text=True)


def test_logout_resets_state(client):
    client.post("/login", data={"username": "alice"})
    _wait_loaded(client)

    client.post("/logout")

    state = client.get("/api/state").get_json()
    assert state["session"] == {"authenticated": False, "identity": ""}
    for resource in state["resources"].values():
        assert resource == {"items": [], "loading": False, "error": None, "status": "idle"}


def test_runner_rejects_calls_when_stopped(fake_backend):
    runner = ControllerRunner(DashboardController(fake_backend))
    with pytest.raises(RuntimeError):
        runner.snapshot()


def test_runner_stop_closes_client(fake_backend):
    runner = ControllerRunner(DashboardController(fake_backend))
    runner.start()
    runner.stop()

    assert fake_backend.closed is True
    assert runner.running is False
