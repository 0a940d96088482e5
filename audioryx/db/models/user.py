# ============================================================================
# FILE: audioryx/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime, timezone
from audioryx.db.base import Base

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class User(Base):
    """Registered identity. Only display_name changes after registration."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)
