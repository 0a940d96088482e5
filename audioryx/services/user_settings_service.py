# ============================================================================
# FILE: audioryx/services/user_settings_service.py
# ============================================================================
from typing import Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from audioryx.db.models.user_settings import UserSettings
from audioryx.schemas.user_settings import SettingsDocument
from pydantic import ValidationError
from audioryx.core.errors import InvalidInput, PersistenceFailure
import logging

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}

class UserSettingsService:
    """One settings document per identity, written with a single upsert"""

    def save_settings(self, db: Session, owner_id: int, data: Dict[str, Any]) -> None:
        """Insert or replace the owner's settings document"""
        try:
            SettingsDocument.model_validate(data)
        except ValidationError as e:
            raise InvalidInput(f"Malformed settings document: {e.error_count()} error(s)")
        dialect = db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            logger.error(f"Settings upsert not supported on {dialect}")
            raise PersistenceFailure(f"Settings upsert not supported on {dialect}")
        try:
            stmt = insert(UserSettings).values(owner_id=owner_id, data=data)
            stmt = stmt.on_conflict_do_update(
                index_elements=[UserSettings.owner_id],
                set_={"data": stmt.excluded.data},
            )
            db.execute(stmt)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error saving settings: {e}")
            raise PersistenceFailure() from e
        logger.info(f"Settings saved for user {owner_id}")

    def get_settings(self, db: Session, owner_id: int) -> Dict[str, Any]:
        """Stored settings document, or an empty one"""
        row = db.query(UserSettings).filter(UserSettings.owner_id == owner_id).first()
        return row.data if row else {}

# Create singleton instance
user_settings_service = UserSettingsService()
