"""
Backend Collections API

Read-only list endpoints, one per resource kind. Each handler returns the
full collection or a 500 with a generic message naming the resource.

Endpoints:
- GET /api/users
- GET /api/customers
- GET /api/jobs
- GET /api/pipelines
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.store import list_documents
from shared.resources import API_PREFIX, ResourceKind

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["collections"])


def _list_or_error(db: Session, kind: ResourceKind):
    try:
        return list_documents(db, kind)
    except Exception as exc:
        logger.error("Error fetching %s: %s", kind.value, exc)
        return JSONResponse(
            status_code=500,
            content={"error": f"Failed to fetch {kind.value} from database."},
        )


@router.get("/users")
def list_users(db: Session = Depends(get_db)):
    return _list_or_error(db, ResourceKind.USERS)


@router.get("/customers")
def list_customers(db: Session = Depends(get_db)):
    return _list_or_error(db, ResourceKind.CUSTOMERS)


@router.get("/jobs")
def list_jobs(db: Session = Depends(get_db)):
    return _list_or_error(db, ResourceKind.JOBS)


@router.get("/pipelines")
def list_pipelines(db: Session = Depends(get_db)):
    return _list_or_error(db, ResourceKind.PIPELINES)
