# ============================================================================
# FILE: audioryx/services/employee_service.py
# ============================================================================
import hmac
from audioryx.core.security import get_password_hash, verify_password
from audioryx.core.errors import InvalidCredentials, NotConfigured
from audioryx.schemas.user import Principal, ROLE_EMPLOYEE
import logging

logger = logging.getLogger(__name__)

EMPLOYEE_ID = 0
EMPLOYEE_DISPLAY_NAME = "Employee"

class EmployeeCredentials:
    """
    Privileged synthetic identity held in server configuration.

    Callers must present the configured email and password. The configured
    password is hashed once at startup and checked with the same bcrypt
    verification as a normal login.
    """

    def __init__(self, email: str, password: str, bcrypt_rounds: int = 12):
        self.email = email or ""
        self._password_hash = get_password_hash(password, bcrypt_rounds) if email and password else None

    @property
    def configured(self) -> bool:
        return self._password_hash is not None

    def authenticate(self, email: str, password: str) -> Principal:
        if not self.configured:
            raise NotConfigured()
        email_ok = hmac.compare_digest(
            email.strip().lower().encode("utf-8"),
            self.email.strip().lower().encode("utf-8"),
        )
        password_ok = verify_password(password, self._password_hash)
        if not (email_ok and password_ok):
            logger.warning("Employee login rejected")
            raise InvalidCredentials()
        logger.info("Employee login accepted")
        return Principal(id=EMPLOYEE_ID, email=self.email, role=ROLE_EMPLOYEE)
