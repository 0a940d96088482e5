# ============================================================================
# FILE: audioryx/api/v1/endpoints/tracks.py
# ============================================================================
from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from typing import List, Optional
from audioryx.api.dependencies import (
    get_db,
    get_track_service,
    get_upload_service,
    get_upload_store,
    require_current_identity,
)
from audioryx.core.errors import NoFile
from audioryx.core.storage import LocalUploadStore
from audioryx.schemas.track import TrackResponse, UploadResponse
from audioryx.schemas.user import Principal
from audioryx.services.track_service import TrackService
from audioryx.services.upload_service import UploadService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/upload", response_model=UploadResponse)
async def upload_track(
    file: Optional[UploadFile] = File(None),
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
    upload_service: UploadService = Depends(get_upload_service),
    store: LocalUploadStore = Depends(get_upload_store),
):
    """
    Upload an audio file as a new track of the current identity
    Requires authentication
    """
    if file is None:
        raise NoFile()
    try:
        content = await file.read()
    finally:
        await file.close()

    track = await run_in_threadpool(upload_service.ingest, db, identity.id, file.filename, content)
    return UploadResponse(
        id=track.id,
        filename=track.storage_name,
        url=store.url_for(track.storage_name),
        title=track.title,
    )

@router.get("", response_model=List[TrackResponse])
def list_tracks(
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
    track_service: TrackService = Depends(get_track_service),
    store: LocalUploadStore = Depends(get_upload_store),
):
    """
    List the current identity's tracks, most recent first
    Requires authentication
    """
    return [
        TrackResponse(
            id=track["id"],
            filename=track["storage_name"],
            title=track["title"],
            artist=track["artist"],
            url=store.url_for(track["storage_name"]),
        )
        for track in track_service.list_tracks(db, identity.id)
    ]
