"""
Backend Service Launcher

Starts the Job Tracker Data Service (FastAPI + uvicorn).

This service provides:
- GET /api/users, /api/customers, /api/jobs, /api/pipelines
- GET / (service banner and endpoint list)

Usage:
    python scripts/run_backend_service.py --host 0.0.0.0 --port 5500

Environment Variables:
    JOBTRACKER_DATABASE_URL: SQLAlchemy URL of the document store (required)
    JOBTRACKER_API_PORT: API port (default: 5500)
    JOBTRACKER_API_BIND_HOST: Bind address (default: 0.0.0.0)
"""
import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from backend.config import BackendSettings
from backend.database import init_db
from backend.errors import ConfigurationError, StorageUnavailable
from shared.logging_config import setup_logging

logger = logging.getLogger("backend")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the Job Tracker backend API")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    args = parser.parse_args()

    setup_logging("backend", log_file=args.log_file)

    if args.host:
        os.environ["JOBTRACKER_API_BIND_HOST"] = args.host
    if args.port:
        os.environ["JOBTRACKER_API_PORT"] = str(args.port)

    try:
        settings = BackendSettings.from_env()
    except ConfigurationError as exc:
        logger.error("Error: %s", exc)
        return 1

    # Fail fast before uvicorn binds the port
    try:
        init_db(settings.database_url)
    except StorageUnavailable as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Server running on port %d", settings.port)
    logger.info("Access test route at: http://localhost:%d", settings.port)
    uvicorn.run("backend.service:app", host=settings.host, port=settings.port, reload=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
