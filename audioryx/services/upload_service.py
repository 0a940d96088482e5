# ============================================================================
# FILE: audioryx/services/upload_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session
from audioryx.db.models.track import Track
from audioryx.core.storage import LocalUploadStore, make_storage_name, title_from_filename
from audioryx.core.errors import NoFile
from audioryx.services.track_service import TrackService
import logging

logger = logging.getLogger(__name__)

DEFAULT_ARTIST = "Local"

class UploadService:
    """Upload intake: bytes in, stored blob plus track row out"""

    def __init__(self, store: LocalUploadStore, track_service: TrackService):
        self.store = store
        self.track_service = track_service

    def ingest(self, db: Session, owner_id: int, filename: Optional[str], content: Optional[bytes]) -> Track:
        """
        Store an uploaded file and record it as a track of its owner.

        Audio container metadata is not parsed: the title comes from the
        filename and the artist is a fixed placeholder.
        """
        if not filename or not content:
            raise NoFile()

        storage_name = make_storage_name(filename)
        self.store.save(storage_name, content)
        try:
            return self.track_service.create_track(
                db,
                owner_id=owner_id,
                storage_name=storage_name,
                title=title_from_filename(filename),
                artist=DEFAULT_ARTIST,
            )
        except Exception:
            # Row not recorded: drop the orphaned blob
            self.store.delete(storage_name)
            raise
