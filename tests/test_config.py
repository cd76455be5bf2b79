from unittest.mock import patch

import pytest

from backend.config import BackendSettings
from backend.errors import ConfigurationError
from dashboard.config import DashboardSettings


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("backend.config.load_dotenv"), patch("dashboard.config.load_dotenv"):
        yield


def test_backend_settings_from_env(monkeypatch):
    monkeypatch.setenv("JOBTRACKER_DATABASE_URL", "sqlite:///tmp.db")
    monkeypatch.setenv("JOBTRACKER_API_PORT", "6000")
    monkeypatch.delenv("JOBTRACKER_API_BIND_HOST", raising=False)

    settings = BackendSettings.from_env()

    assert settings.database_url == "sqlite:///tmp.db"
    assert settings.port == 6000
    assert settings.host == "0.0.0.0"


def test_backend_defaults_port_on_garbage(monkeypatch):
    monkeypatch.setenv("JOBTRACKER_DATABASE_URL", "sqlite:///tmp.db")
    monkeypatch.setenv("JOBTRACKER_API_PORT", "not-a-port")

    assert BackendSettings.from_env().port == 5500


def test_backend_requires_database_url(monkeypatch):
    monkeypatch.delenv("JOBTRACKER_DATABASE_URL", raising=False)

    with pytest.raises(ConfigurationError, match="JOBTRACKER_DATABASE_URL"):
        BackendSettings.from_env()


def test_backend_rejects_out_of_range_port():
    with pytest.raises(ConfigurationError):
        BackendSettings(database_url="sqlite://", host="0.0.0.0", port=70000).validate()


def test_dashboard_defaults(monkeypatch):
    for name in (
        "JOBTRACKER_API_BASE_URL",
        "JOBTRACKER_GUI_PORT",
        "JOBTRACKER_GUI_BIND_HOST",
        "JOBTRACKER_FETCH_TIMEOUT",
        "JOBTRACKER_GUI_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = DashboardSettings.from_env()

    assert settings.api_base_url == "http://localhost:5500/api"
    assert settings.port == 5000
    assert settings.fetch_timeout_seconds == 10.0
    assert settings.debug is False


def test_dashboard_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv("JOBTRACKER_API_BASE_URL", "http://backend:5500/api/")
    assert DashboardSettings.from_env().api_base_url == "http://backend:5500/api"


def test_dashboard_rejects_invalid_base_url(monkeypatch):
    monkeypatch.setenv("JOBTRACKER_API_BASE_URL", "localhost:5500")
    with pytest.raises(ValueError, match="api_base_url"):
        DashboardSettings.from_env()
