"""
Load documents into the backend store.

The input is a JSON object keyed by collection name:

    {"users": [{"_id": "1", "name": "Bob"}], "jobs": [], ...}

Unknown keys are rejected. Documents are stored verbatim; `_id` is kept when
present.

Usage:
    python scripts/seed_collections.py --file scripts/sample_data.json [--replace]
"""
import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

from backend.database import SessionLocal, init_db
from backend.errors import StorageUnavailable
from backend.store import clear_collection, insert_documents
from shared.logging_config import setup_logging
from shared.resources import ResourceKind

logger = logging.getLogger("seed")


def load_seed_file(path: Path) -> dict:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed file must contain a JSON object keyed by collection name")
    known = {kind.value for kind in ResourceKind}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown collection(s) in seed file: {', '.join(unknown)}")
    return data


def seed(database_url: str, data: dict, replace: bool = False) -> dict:
    init_db(database_url)
    counts = {}
    db = SessionLocal()
    try:
        for name, documents in data.items():
            kind = ResourceKind(name)
            if replace:
                removed = clear_collection(db, kind)
                logger.info("Cleared %d document(s) from %s", removed, kind.collection)
            counts[name] = insert_documents(db, kind, documents or [])
    finally:
        db.close()
    return counts


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the Job Tracker document collections")
    parser.add_argument("--file", required=True, help="JSON file keyed by collection name")
    parser.add_argument("--database-url", default=None, help="Overrides JOBTRACKER_DATABASE_URL")
    parser.add_argument("--replace", action="store_true", help="Empty each listed collection first")
    args = parser.parse_args()

    setup_logging("seed")
    load_dotenv(override=False)

    database_url = args.database_url or str(os.getenv("JOBTRACKER_DATABASE_URL", "")).strip()
    if not database_url:
        logger.error("Error: JOBTRACKER_DATABASE_URL is not defined. Please check your .env file.")
        return 1

    try:
        data = load_seed_file(Path(args.file))
        counts = seed(database_url, data, replace=args.replace)
    except (OSError, ValueError) as exc:
        logger.error("Cannot seed collections: %s", exc)
        return 1
    except StorageUnavailable as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(counts, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
