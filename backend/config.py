from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from backend.errors import ConfigurationError


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return int(raw)
    except Exception:
        return default


@dataclass(frozen=True)
class BackendSettings:
    database_url: str
    host: str
    port: int

    @staticmethod
    def from_env(load_env_file: bool = True) -> "BackendSettings":
        if load_env_file:
            # Values already present in the process environment win over .env
            load_dotenv(override=False)

        settings = BackendSettings(
            database_url=str(os.getenv("JOBTRACKER_DATABASE_URL", "")).strip(),
            host=str(os.getenv("JOBTRACKER_API_BIND_HOST", "0.0.0.0")).strip(),
            port=_int_env("JOBTRACKER_API_PORT", 5500),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not self.database_url:
            raise ConfigurationError(
                "JOBTRACKER_DATABASE_URL is not defined. Please check your .env file."
            )
        if not self.host:
            raise ConfigurationError("JOBTRACKER_API_BIND_HOST must not be empty")
        if self.port < 1 or self.port > 65535:
            raise ConfigurationError("JOBTRACKER_API_PORT must be in range 1..65535")
