"""
Backend database connection.

The engine is created from JOBTRACKER_DATABASE_URL at startup; until then
`SessionLocal` is unbound and any query fails.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from backend.errors import StorageUnavailable
from backend.models import Base

logger = logging.getLogger(__name__)

engine: Engine = None
SessionLocal = sessionmaker(autoflush=False)


def configure_engine(database_url: str) -> Engine:
    """Bind the session factory to a new engine for `database_url`."""
    global engine

    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False

    if engine is not None:
        engine.dispose()
    engine = create_engine(url, connect_args=connect_args)
    SessionLocal.configure(bind=engine)
    return engine


def init_db(database_url: str) -> None:
    """
    Connect to the backing store and make sure the documents table exists.
    Raises StorageUnavailable if the initial connection attempt fails.
    """
    try:
        configure_engine(database_url)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        raise StorageUnavailable(f"Database connection error: {exc}") from exc

    logger.info("Connected to %s database successfully!", engine.url.get_backend_name())


def dispose_engine() -> None:
    global engine
    if engine is not None:
        engine.dispose()
        engine = None


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
