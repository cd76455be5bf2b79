import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any

import requests

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from shared.resources import ALL_KINDS, API_PREFIX


class DemoValidationError(RuntimeError):
    pass


def req(base_url: str, method: str, path: str, **kwargs: Any) -> requests.Response:
    url = f"{base_url.rstrip('/')}{path}"
    response = requests.request(method, url, timeout=20, **kwargs)
    return response


def req_json(base_url: str, method: str, path: str, expected: tuple[int, ...] = (200,), **kwargs: Any) -> Any:
    response = req(base_url, method, path, **kwargs)
    try:
        payload = response.json()
    except Exception as exc:
        raise DemoValidationError(f"{method} {path} returned non-JSON body: {response.text[:300]}") from exc

    if response.status_code not in expected:
        raise DemoValidationError(
            f"{method} {path} failed with HTTP {response.status_code}: {json.dumps(payload, default=str)}"
        )

    if isinstance(payload, dict) and payload.get("error"):
        raise DemoValidationError(f"{method} {path} returned error payload: {payload}")

    return payload


def check_backend(backend_url: str, report: dict[str, Any]) -> None:
    banner = req_json(backend_url, "GET", "/")
    report["checks"].append({"name": "backend_banner", "ok": True, "endpoints": banner.get("endpoints", [])})

    for kind in ALL_KINDS:
        documents = req_json(backend_url, "GET", f"{API_PREFIX}{kind.endpoint}")
        if not isinstance(documents, list):
            raise DemoValidationError(f"{kind.endpoint} did not return a JSON array")
        report["checks"].append({"name": f"list_{kind.value}", "ok": True, "count": len(documents)})


def check_dashboard(dashboard_url: str, report: dict[str, Any], wait_seconds: float) -> None:
    session = requests.Session()
    session.post(f"{dashboard_url.rstrip('/')}/login", data={"username": "demo"}, timeout=20)

    deadline = time.time() + wait_seconds
    state = req_json(dashboard_url, "GET", "/api/state")
    while any(r["loading"] for r in state["resources"].values()) and time.time() < deadline:
        time.sleep(0.5)
        state = req_json(dashboard_url, "GET", "/api/state")

    if not state["session"]["authenticated"]:
        raise DemoValidationError("Dashboard did not accept the mock login")

    failed = {name: r["error"] for name, r in state["resources"].items() if r["error"]}
    if failed:
        raise DemoValidationError(f"Dashboard reported fetch errors: {failed}")
    report["checks"].append(
        {
            "name": "dashboard_loaded",
            "ok": True,
            "counts": {name: len(r["items"]) for name, r in state["resources"].items()},
        }
    )

    session.post(f"{dashboard_url.rstrip('/')}/logout", timeout=20)
    state = req_json(dashboard_url, "GET", "/api/state")
    if state["session"]["authenticated"] or any(r["items"] for r in state["resources"].values()):
        raise DemoValidationError("Dashboard state was not reset by logout")
    report["checks"].append({"name": "dashboard_reset", "ok": True})


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate the backend endpoints and the dashboard login cycle")
    parser.add_argument("--backend-url", default="http://127.0.0.1:5500", help="Backend root URL")
    parser.add_argument("--dashboard-url", default="", help="Dashboard root URL (skipped when empty)")
    parser.add_argument("--wait", type=float, default=15.0, help="Seconds to wait for dashboard fetches")
    parser.add_argument("--output", default="", help="Optional JSON report output path")
    args = parser.parse_args()

    report: dict[str, Any] = {"backend_url": args.backend_url, "checks": []}
    check_backend(args.backend_url, report)
    if args.dashboard_url:
        check_dashboard(args.dashboard_url, report, args.wait)

    pretty = json.dumps(report, indent=2, default=str)
    print(pretty)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(pretty)
            handle.write("\n")


if __name__ == "__main__":
    main()
