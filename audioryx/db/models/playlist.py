# ============================================================================
# FILE: audioryx/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, JSON
from audioryx.db.base import Base
from audioryx.db.models.user import utcnow

class Playlist(Base):
    """User-created playlist; metadata is replaced wholesale on update"""
    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, index=True, nullable=False)
    name = Column(String, nullable=False)
    metadata_ = Column("metadata", JSON, nullable=False, default=lambda: {"tracks": []})
    created_at = Column(DateTime, default=utcnow)
