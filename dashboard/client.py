from __future__ import annotations

from typing import Any

import requests

from shared.resources import ResourceKind


class FetchError(RuntimeError):
    def __init__(self, kind: ResourceKind, reason: str, status_code: int | None = None):
        super().__init__(f"{kind.value}: {reason}")
        self.kind = kind
        self.reason = reason
        self.status_code = status_code


class DataServiceClient:
    """Blocking client for the backend's list endpoints."""

    def __init__(self, base_url: str, timeout_seconds: float = 10.0):
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def base_address(self) -> str:
        """Service root without the '/api' prefix, shown to the user on failures."""
        return self._base_url.split("/api")[0] or self._base_url

    def list_resource(self, kind: ResourceKind) -> list[dict[str, Any]]:
        url = f"{self._base_url}{kind.endpoint}"
        try:
            response = self._session.get(url, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise FetchError(kind, f"Failed to fetch ({exc.__class__.__name__}: {exc})") from exc

        if not response.ok:
            raise FetchError(
                kind,
                f"HTTP error! Status: {response.status_code} - {response.reason or 'Unknown Error'}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(kind, f"Invalid JSON in response: {exc}", status_code=response.status_code) from exc

        if not isinstance(payload, list):
            raise FetchError(
                kind,
                f"Expected a JSON array, got {type(payload).__name__}",
                status_code=response.status_code,
            )
        return payload

    def close(self) -> None:
        self._session.close()
