"""
Backend storage model.

Every collection shares one table; a row is one schema-less document whose
body is kept verbatim as JSON. No field other than `_id` is interpreted.
"""

from sqlalchemy import Column, Integer, String, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String, nullable=False, index=True)
    # String copy of the body's `_id` for lookups; the body keeps the original value
    doc_id = Column(String, nullable=False)
    body = Column(JSON, nullable=False, default=dict)

    def to_document(self) -> dict:
        """Serialize as the API returns it: `_id` first, then the stored fields."""
        body = self.body or {}
        payload = {"_id": body.get("_id", self.doc_id)}
        for key, value in body.items():
            if key != "_id":
                payload[key] = value
        return payload
