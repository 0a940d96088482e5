# ============================================================================
# FILE: audioryx/services/track_service.py
# ============================================================================
from typing import List, Dict
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from audioryx.db.models.track import Track
from audioryx.core.cache import RedisCache
from audioryx.core.errors import PersistenceFailure
import logging

logger = logging.getLogger(__name__)

class TrackService:
    """Service layer for track rows, always scoped by owner"""

    def __init__(self, cache: RedisCache):
        self.cache = cache

    @staticmethod
    def _cache_key(owner_id: int) -> str:
        return f"tracks:{owner_id}"

    def create_track(self, db: Session, owner_id: int, storage_name: str, title: str, artist: str) -> Track:
        """Record an uploaded file for its owner"""
        try:
            track = Track(owner_id=owner_id, storage_name=storage_name, title=title, artist=artist)
            db.add(track)
            db.commit()
            db.refresh(track)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating track: {e}")
            raise PersistenceFailure() from e
        self.cache.delete_cache(self._cache_key(owner_id))
        logger.info(f"Track created: {track.id} for user {owner_id}")
        return track

    def list_tracks(self, db: Session, owner_id: int) -> List[Dict]:
        """
        Get all tracks for an owner, most recent first

        Returns plain dicts (id, storage_name, title, artist) so the listing
        can be cached as JSON.
        """
        cache_key = self._cache_key(owner_id)
        cached = self.cache.get_cache(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return cached

        rows = db.query(Track).filter(Track.owner_id == owner_id).order_by(Track.id.desc()).all()
        tracks = [
            {
                "id": row.id,
                "storage_name": row.storage_name,
                "title": row.title,
                "artist": row.artist,
            }
            for row in rows
        ]
        # An upload committed between the query and this write is missing from
        # the cached listing until the entry expires (CACHE_EXPIRE_SECONDS)
        self.cache.set_cache(cache_key, tracks)
        return tracks
