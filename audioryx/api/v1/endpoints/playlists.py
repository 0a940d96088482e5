# ============================================================================
# FILE: audioryx/api/v1/endpoints/playlists.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from audioryx.api.dependencies import get_db, get_settings, require_current_identity
from audioryx.config import Settings
from audioryx.core.errors import Forbidden
from audioryx.schemas.playlist import (
    OkResponse,
    PlaylistCreate,
    PlaylistCreated,
    PlaylistMetadataUpdate,
)
from audioryx.schemas.user import Principal
from audioryx.services.playlist_service import playlist_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=PlaylistCreated)
def create_playlist(
    playlist_data: PlaylistCreate,
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
):
    """
    Create a new, empty playlist
    Requires authentication
    """
    playlist = playlist_service.create_playlist(db, identity.id, playlist_data.name)
    return {"id": playlist.id, "name": playlist.name}

@router.get("")
def list_playlists(
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    """
    Get all playlists for the current identity, metadata flattened in
    Requires authentication
    """
    playlists = playlist_service.get_user_playlists(db, identity.id)
    return [playlist_service.to_listing(p) for p in playlists]

@router.put("/{playlist_id}", response_model=OkResponse)
def replace_playlist_metadata(
    playlist_id: int,
    update: PlaylistMetadataUpdate,
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Replace a playlist's metadata document
    A playlist that is missing or owned by someone else is left untouched;
    that answers ok unless STRICT_PLAYLIST_OWNERSHIP is enabled
    """
    updated = playlist_service.replace_metadata(
        db, playlist_id, identity.id, update.metadata.model_dump()
    )
    if not updated and settings.STRICT_PLAYLIST_OWNERSHIP:
        raise Forbidden("Playlist not owned by this identity")
    return {"ok": True}

@router.delete("/{playlist_id}", response_model=OkResponse)
def delete_playlist(
    playlist_id: int,
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Delete a playlist
    Same ownership rules as replacing metadata
    """
    deleted = playlist_service.delete_playlist(db, playlist_id, identity.id)
    if not deleted and settings.STRICT_PLAYLIST_OWNERSHIP:
        raise Forbidden("Playlist not owned by this identity")
    return {"ok": True}
