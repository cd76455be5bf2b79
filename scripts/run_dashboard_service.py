"""
Dashboard Service Launcher

Starts the Job Tracker dashboard GUI (Flask).

Architecture:
-------------
- Flask web server (port 5000)
- Dashboard controller on a background asyncio loop
- One fetch per collection on every (mock) login

Usage:
------
python scripts/run_dashboard_service.py

Environment Variables:
----------------------
JOBTRACKER_API_BASE_URL: Backend API base URL (default: http://localhost:5500/api)
JOBTRACKER_GUI_PORT: Flask server port (default: 5000)
JOBTRACKER_GUI_BIND_HOST: Flask bind address (default: 0.0.0.0)
JOBTRACKER_GUI_DEBUG: Enable Flask debug mode (default: false)
JOBTRACKER_FETCH_TIMEOUT: Per-request timeout in seconds (default: 10)
"""

import argparse
import atexit
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dashboard.config import DashboardSettings
from dashboard.service import build_runner, create_app
from shared.logging_config import setup_logging

logger = logging.getLogger("dashboard")


def main():
    """Main entrypoint for the dashboard service."""
    parser = argparse.ArgumentParser(description="Run the Job Tracker dashboard GUI")
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    args = parser.parse_args()

    setup_logging("dashboard", log_file=args.log_file)

    try:
        settings = DashboardSettings.from_env()
    except ValueError as exc:
        logger.error("Invalid dashboard configuration: %s", exc)
        return 1

    runner = build_runner(settings)
    app = create_app(settings, runner=runner)
    atexit.register(runner.stop)

    logger.info("Backend API: %s", settings.api_base_url)
    logger.info("Dashboard available at: http://%s:%d", settings.host, settings.port)

    try:
        app.run(
            host=settings.host,
            port=settings.port,
            debug=settings.debug,
            use_reloader=False  # Avoid a second controller loop in the reloader process
        )
    except KeyboardInterrupt:
        logger.info("Shutting down dashboard service...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
