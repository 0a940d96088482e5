# ============================================================================
# FILE: audioryx/api/dependencies.py
# ============================================================================
from typing import Iterator
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from audioryx.api.guard import Authenticated, OwnershipGuard
from audioryx.config import Settings
from audioryx.core.errors import Unauthorized
from audioryx.core.storage import LocalUploadStore
from audioryx.schemas.user import Principal
from audioryx.services.employee_service import EmployeeCredentials
from audioryx.services.token_service import TokenService
from audioryx.services.track_service import TrackService
from audioryx.services.upload_service import UploadService
from audioryx.services.user_service import UserService

# Services are built once by create_app and shared through app.state

def get_db(request: Request) -> Iterator[Session]:
    yield from request.app.state.database.get_session()

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service

def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service

def get_employee_credentials(request: Request) -> EmployeeCredentials:
    return request.app.state.employee_credentials

def get_track_service(request: Request) -> TrackService:
    return request.app.state.track_service

def get_upload_service(request: Request) -> UploadService:
    return request.app.state.upload_service

def get_upload_store(request: Request) -> LocalUploadStore:
    return request.app.state.upload_store

def get_guard(request: Request) -> OwnershipGuard:
    return request.app.state.guard

def require_current_identity(
    request: Request,
    guard: OwnershipGuard = Depends(get_guard),
) -> Principal:
    """
    Require an authenticated identity (raises 401 if not authenticated)
    Every owned-resource endpoint depends on this
    """
    result = guard.authenticate(request.headers.get("Authorization"))
    if not isinstance(result, Authenticated):
        raise Unauthorized(result.reason)
    request.state.identity = result.principal
    return result.principal
