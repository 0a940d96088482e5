# ============================================================================
# FILE: audioryx/api/v1/endpoints/user_settings.py
# ============================================================================
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict
from audioryx.api.dependencies import get_db, require_current_identity
from audioryx.schemas.playlist import OkResponse
from audioryx.schemas.user import Principal
from audioryx.services.user_settings_service import user_settings_service

router = APIRouter()

@router.post("", response_model=OkResponse)
def save_settings(
    document: Dict[str, Any] = Body(...),
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
):
    """Replace the current identity's settings document"""
    user_settings_service.save_settings(db, identity.id, document)
    return {"ok": True}

@router.get("")
def get_settings(
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """Stored settings document, or {} when nothing was saved yet"""
    return user_settings_service.get_settings(db, identity.id)
