# ============================================================================
# FILE: audioryx/services/playlist_service.py
# ============================================================================
from typing import List, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from audioryx.db.models.playlist import Playlist
from audioryx.schemas.playlist import PlaylistMetadata
from pydantic import ValidationError
from audioryx.core.errors import InvalidInput, PersistenceFailure
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """Service layer for playlist operations"""

    def create_playlist(self, db: Session, owner_id: int, name: str) -> Playlist:
        """Create an empty playlist for a user"""
        try:
            playlist = Playlist(owner_id=owner_id, name=name, metadata_=PlaylistMetadata().model_dump())
            db.add(playlist)
            db.commit()
            db.refresh(playlist)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise PersistenceFailure() from e
        logger.info(f"Playlist created: {playlist.id} for user {owner_id}")
        return playlist

    def get_user_playlists(self, db: Session, owner_id: int) -> List[Playlist]:
        """Get all playlists for a user"""
        return db.query(Playlist).filter(Playlist.owner_id == owner_id).order_by(Playlist.id).all()

    def replace_metadata(self, db: Session, playlist_id: int, owner_id: int, metadata: Dict[str, Any]) -> bool:
        """
        Replace the whole metadata document of an owned playlist.

        Returns False when no playlist with this id belongs to the owner;
        nothing is written in that case.
        """
        try:
            document = PlaylistMetadata.model_validate(metadata).model_dump()
        except ValidationError as e:
            raise InvalidInput(f"Malformed playlist metadata: {e.error_count()} error(s)")
        try:
            updated = db.query(Playlist).filter(
                Playlist.id == playlist_id,
                Playlist.owner_id == owner_id
            ).update({Playlist.metadata_: document}, synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating playlist: {e}")
            raise PersistenceFailure() from e
        if updated:
            logger.info(f"Playlist updated: {playlist_id}")
        else:
            logger.info(f"Playlist update matched nothing: {playlist_id} for user {owner_id}")
        return bool(updated)

    def delete_playlist(self, db: Session, playlist_id: int, owner_id: int) -> bool:
        """Delete an owned playlist; False when it is missing or someone else's"""
        try:
            deleted = db.query(Playlist).filter(
                Playlist.id == playlist_id,
                Playlist.owner_id == owner_id
            ).delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise PersistenceFailure() from e
        if deleted:
            logger.info(f"Playlist deleted: {playlist_id}")
        return bool(deleted)

    @staticmethod
    def to_listing(playlist: Playlist) -> Dict[str, Any]:
        """Flatten a playlist row into {...metadata, id, name}"""
        return {**(playlist.metadata_ or {}), "id": playlist.id, "name": playlist.name}

# Create singleton instance
playlist_service = PlaylistService()
