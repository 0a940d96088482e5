# ============================================================================
# FILE: audioryx/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from typing import List, Union

PLAYLIST_METADATA_VERSION = 1

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: str = Field(..., min_length=1, max_length=200)

class PlaylistMetadata(BaseModel):
    """
    Playlist document stored wholesale in playlists.metadata.

    `tracks` is the ordered list of track references (ids). Clients may keep
    additional keys next to it; they are stored untouched.
    """
    model_config = ConfigDict(extra="allow")

    version: int = Field(PLAYLIST_METADATA_VERSION, ge=1, le=PLAYLIST_METADATA_VERSION)
    tracks: List[Union[StrictInt, StrictStr]] = Field(default_factory=list)

class PlaylistMetadataUpdate(BaseModel):
    """Schema for replacing playlist metadata"""
    metadata: PlaylistMetadata

class PlaylistCreated(BaseModel):
    id: int
    name: str

class OkResponse(BaseModel):
    ok: bool = True
