# ============================================================================
# FILE: audioryx/db/models/track.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from audioryx.db.base import Base
from audioryx.db.models.user import utcnow

class Track(Base):
    """Uploaded audio file owned by one identity"""
    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True, index=True)
    # No foreign key: owner 0 is the employee identity, which has no users row
    owner_id = Column(Integer, index=True, nullable=False)
    storage_name = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    artist = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)
