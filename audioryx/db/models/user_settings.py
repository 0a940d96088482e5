# ============================================================================
# FILE: audioryx/db/models/user_settings.py
# ============================================================================
from sqlalchemy import Column, Integer, JSON
from audioryx.db.base import Base

class UserSettings(Base):
    """One settings document per identity"""
    __tablename__ = "settings"

    owner_id = Column(Integer, primary_key=True)
    data = Column(JSON, nullable=False)
