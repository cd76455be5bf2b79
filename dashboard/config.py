from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import load_dotenv


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return float(raw)
    except Exception:
        return default


@dataclass(frozen=True)
class DashboardSettings:
    api_base_url: str
    host: str
    port: int
    fetch_timeout_seconds: float
    secret_key: str
    debug: bool = False

    @staticmethod
    def from_env(load_env_file: bool = True) -> "DashboardSettings":
        if load_env_file:
            load_dotenv(override=False)

        settings = DashboardSettings(
            api_base_url=str(os.getenv("JOBTRACKER_API_BASE_URL", "http://localhost:5500/api")).strip().rstrip("/"),
            host=str(os.getenv("JOBTRACKER_GUI_BIND_HOST", "0.0.0.0")).strip(),
            port=_int_env("JOBTRACKER_GUI_PORT", 5000),
            fetch_timeout_seconds=_float_env("JOBTRACKER_FETCH_TIMEOUT", 10.0),
            secret_key=str(os.getenv("JOBTRACKER_GUI_SECRET", "jobtracker-dashboard-secret")),
            debug=os.getenv("JOBTRACKER_GUI_DEBUG", "false").lower() in {"true", "1", "yes"},
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not self.host:
            raise ValueError("host is required")
        if self.port < 1 or self.port > 65535:
            raise ValueError("port must be in range 1..65535")
        if self.fetch_timeout_seconds <= 0:
            raise ValueError("JOBTRACKER_FETCH_TIMEOUT must be greater than 0")

        parsed = urlparse(self.api_base_url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("api_base_url must be a valid http(s) URL")
