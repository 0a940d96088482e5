# ============================================================================
# FILE: audioryx/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

def import_models() -> None:
    """Register every model on Base.metadata before create_all"""
    from audioryx.db.models import user, track, playlist, user_settings  # noqa: F401
