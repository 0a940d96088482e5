# ============================================================================
# FILE: audioryx/api/guard.py
# ============================================================================
"""
Ownership guard: the single gate in front of every owned resource.

`OwnershipGuard.authenticate` turns the raw Authorization header into either
`Authenticated` (carrying the resolved principal) or `Rejected` (carrying the
reason). It never raises; the FastAPI dependency in api/dependencies.py
decides how a rejection is reported.
"""
from dataclasses import dataclass
from typing import Optional, Union
from audioryx.core.errors import MissingToken, TokenError
from audioryx.schemas.user import Principal
from audioryx.services.token_service import TokenService
import logging

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"

@dataclass(frozen=True)
class Authenticated:
    principal: Principal

@dataclass(frozen=True)
class Rejected:
    reason: str

GuardResult = Union[Authenticated, Rejected]

def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Token part of `Bearer <token>`, or None when absent or another scheme"""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    return token.strip() or None

class OwnershipGuard:
    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    def authenticate(self, authorization: Optional[str]) -> GuardResult:
        token = extract_bearer_token(authorization)
        try:
            principal = self.token_service.verify(token)
        except MissingToken:
            return Rejected("missing token")
        except TokenError as e:
            logger.info(f"Rejected bearer token: {e}")
            return Rejected("invalid token")
        return Authenticated(principal)
