import logging
import uuid
from typing import Any, Dict, Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.models import Document
from shared.resources import ResourceKind

logger = logging.getLogger(__name__)


def list_documents(db: Session, kind: ResourceKind) -> List[Dict[str, Any]]:
    """Return every document of the collection in the order the store yields them."""
    rows = db.scalars(select(Document).where(Document.collection == kind.collection)).all()
    return [row.to_document() for row in rows]


def insert_documents(db: Session, kind: ResourceKind, documents: Iterable[Dict[str, Any]]) -> int:
    """
    Store documents verbatim in a collection (operator seed path, not exposed over HTTP).
    Documents without an `_id` key get a random hex id; an existing `_id` is kept as is.
    """
    count = 0
    for document in documents:
        if not isinstance(document, dict):
            raise ValueError(f"{kind.value} entries must be JSON objects, got {type(document).__name__}")
        body = dict(document)
        if "_id" not in body:
            body["_id"] = uuid.uuid4().hex
        db.add(Document(collection=kind.collection, doc_id=str(body["_id"]), body=body))
        count += 1
    db.commit()
    logger.info("Inserted %d document(s) into %s", count, kind.collection)
    return count


def clear_collection(db: Session, kind: ResourceKind) -> int:
    rows = db.scalars(select(Document).where(Document.collection == kind.collection)).all()
    for row in rows:
        db.delete(row)
    db.commit()
    return len(rows)
