# ============================================================================
# FILE: audioryx/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from audioryx.api.v1.endpoints import auth, tracks, playlists, user_settings

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(tracks.router, prefix="/tracks", tags=["tracks"])
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(user_settings.router, prefix="/settings", tags=["settings"])
