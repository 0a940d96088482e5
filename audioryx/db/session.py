# ============================================================================
# FILE: audioryx/db/session.py
# ============================================================================
from typing import Iterator
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from audioryx.db.base import Base, import_models
import logging

logger = logging.getLogger(__name__)

class Database:
    """Owns the engine and session factory for one application instance"""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {}
        if url.startswith("sqlite"):
            # Sessions are used from FastAPI's threadpool
            connect_args["check_same_thread"] = False
        self.engine = create_engine(url, echo=echo, connect_args=connect_args, pool_pre_ping=True)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _sqlite_pragmas)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def create_all(self) -> None:
        """Create database tables if they do not exist"""
        import_models()
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database ready ({self.engine.dialect.name})")

    def dispose(self) -> None:
        self.engine.dispose()

    def get_session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

def _sqlite_pragmas(dbapi_connection, connection_record):
    # WAL lets readers proceed while a writer commits
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()
