# ============================================================================
# FILE: audioryx/api/v1/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from audioryx.api.dependencies import (
    get_db,
    get_employee_credentials,
    get_token_service,
    get_user_service,
    require_current_identity,
)
from audioryx.core.errors import Forbidden, Unauthorized
from audioryx.schemas.user import (
    AuthResponse,
    DisplayNameUpdate,
    Principal,
    UserCreate,
    UserLogin,
    UserResponse,
    ROLE_EMPLOYEE,
)
from audioryx.services.employee_service import EmployeeCredentials, EMPLOYEE_DISPLAY_NAME
from audioryx.services.token_service import TokenService
from audioryx.services.user_service import UserService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/register", response_model=AuthResponse)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Register a new account and log it in
    """
    user = user_service.register_user(db, user_data)
    return {"user": UserResponse.model_validate(user), "token": token_service.issue(user)}

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Login with email and password
    Returns a fresh bearer token
    """
    user = user_service.authenticate_user(db, credentials.email, credentials.password)
    return {"user": UserResponse.model_validate(user), "token": token_service.issue(user)}

@router.post("/employee-login", response_model=AuthResponse)
def employee_login(
    credentials: UserLogin,
    employee: EmployeeCredentials = Depends(get_employee_credentials),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Login as the privileged employee identity (id 0)
    Requires the configured employee email and password; the token lasts 2 hours
    """
    principal = employee.authenticate(credentials.email, credentials.password)
    user = UserResponse(
        id=principal.id,
        email=principal.email,
        display_name=EMPLOYEE_DISPLAY_NAME,
        role=ROLE_EMPLOYEE,
    )
    return {"user": user, "token": token_service.issue(principal, role=ROLE_EMPLOYEE)}

@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    """
    Get current identity information
    Requires authentication
    """
    if identity.is_employee:
        return UserResponse(
            id=identity.id,
            email=identity.email,
            display_name=EMPLOYEE_DISPLAY_NAME,
            role=ROLE_EMPLOYEE,
        )
    user = user_service.get_user(db, identity.id)
    if not user:
        # Token outlived its account row
        raise Unauthorized("unknown identity")
    return UserResponse.model_validate(user)

@router.patch("/me", response_model=UserResponse)
def update_current_user(
    update: DisplayNameUpdate,
    identity: Principal = Depends(require_current_identity),
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    """
    Change the display name of the current user
    The employee identity has no stored profile to change
    """
    if identity.is_employee:
        raise Forbidden("Employee identity cannot be renamed")
    user = user_service.update_display_name(db, identity.id, update.display_name)
    if not user:
        raise Unauthorized("unknown identity")
    return UserResponse.model_validate(user)
