# ============================================================================
# FILE: audioryx/services/token_service.py
# ============================================================================
"""
Signed, time-limited bearer tokens.

Tokens are HS256 JWTs carrying the identity id (as `sub` and `id`), email and
role. Users get a 7-day lifetime, the employee identity 2 hours. There is no
refresh: an expired token means logging in again.
"""
import uuid
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError

from audioryx.core.errors import MissingToken, InvalidToken
from audioryx.schemas.user import Principal, ROLE_USER, ROLE_EMPLOYEE

logger = logging.getLogger(__name__)

class TokenService:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        user_ttl: timedelta = timedelta(days=7),
        employee_ttl: timedelta = timedelta(hours=2),
    ):
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttls = {ROLE_USER: user_ttl, ROLE_EMPLOYEE: employee_ttl}

    def issue(self, identity, role: str = ROLE_USER, now: Optional[datetime] = None) -> str:
        """Sign a token for any object exposing `id` and `email`"""
        if role not in self.ttls:
            raise ValueError(f"Unknown role: {role}")
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(identity.id),
            "id": identity.id,
            "email": identity.email,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + self.ttls[role],
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> Principal:
        """Decode a token into the identity it was issued for"""
        if not token or not token.strip():
            raise MissingToken("No bearer token")
        try:
            payload = jwt.decode(
                token.strip(),
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {e}")
            raise InvalidToken("Token invalid")

        if payload.get("role") not in self.ttls or str(payload.get("id")) != payload["sub"]:
            raise InvalidToken("Token claims malformed")
        try:
            return Principal(id=payload["id"], email=payload["email"], role=payload["role"])
        except (KeyError, ValidationError):
            raise InvalidToken("Token claims malformed")
