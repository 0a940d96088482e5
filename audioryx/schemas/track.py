# ============================================================================
# FILE: audioryx/schemas/track.py
# ============================================================================
from pydantic import BaseModel

class TrackResponse(BaseModel):
    """Schema for a listed track"""
    id: int
    filename: str
    title: str
    artist: str
    url: str

class UploadResponse(BaseModel):
    """Schema for a freshly ingested track"""
    id: int
    filename: str
    url: str
    title: str
