# ============================================================================
# FILE: audioryx/schemas/user.py
# ============================================================================
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from audioryx.core.security import MAX_PASSWORD_BYTES

ROLE_USER = "user"
ROLE_EMPLOYEE = "employee"

def _check_password_length(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value

class UserCreate(BaseModel):
    """Schema for user registration"""
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str = Field(..., min_length=1)
    display_name: Optional[str] = Field(None, alias="displayName", max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_length(value)

class UserLogin(BaseModel):
    """Schema for user and employee login"""
    email: EmailStr
    password: str = Field(..., min_length=1)

class DisplayNameUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    display_name: str = Field(..., alias="displayName", min_length=1, max_length=100)

class Principal(BaseModel):
    """Identity resolved from a verified bearer token"""
    id: int
    email: str
    role: str = ROLE_USER

    @property
    def is_employee(self) -> bool:
        return self.role == ROLE_EMPLOYEE

class UserResponse(BaseModel):
    """Schema for user response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    display_name: str
    role: str = ROLE_USER

class AuthResponse(BaseModel):
    """Identity plus the bearer token to use on later requests"""
    user: UserResponse
    token: str
