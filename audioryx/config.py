# ============================================================================
# FILE: audioryx/config.py
# ============================================================================
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from audioryx.core.errors import ConfigurationError
from audioryx.core.security import MAX_PASSWORD_BYTES

# Well-known placeholder secrets; never accepted for signing
INSECURE_SECRETS = {
    "change-me-please",
    "your-secret-key-change-this-in-production",
    "secret",
    "changeme",
}
MIN_SECRET_LENGTH = 32

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # App settings
    APP_NAME: str = "Audioryx"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Storage
    DATABASE_URL: str = "sqlite:///./audioryx.db"
    UPLOAD_DIR: str = "./uploads"

    # Redis cache (empty URL disables caching)
    REDIS_URL: str = ""
    CACHE_EXPIRE_SECONDS: int = 60

    # Security
    SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    EMPLOYEE_TOKEN_EXPIRE_HOURS: int = 2
    BCRYPT_ROUNDS: int = 12

    # Privileged employee identity
    EMPLOYEE_EMAIL: str = ""
    EMPLOYEE_PASSWORD: str = ""

    # Cross-owner playlist mutations answer 403 instead of a silent no-op
    STRICT_PLAYLIST_OWNERSHIP: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:4000"]

    @property
    def employee_configured(self) -> bool:
        return bool(self.EMPLOYEE_EMAIL and self.EMPLOYEE_PASSWORD)

    def check_security(self) -> None:
        """Refuse to run with a guessable signing secret or unusable credentials"""
        secret = self.SECRET_KEY.strip()
        if not secret:
            raise ConfigurationError("SECRET_KEY is not set")
        if secret.lower() in INSECURE_SECRETS:
            raise ConfigurationError("SECRET_KEY is a known placeholder value")
        if len(secret) < MIN_SECRET_LENGTH:
            raise ConfigurationError(
                f"SECRET_KEY must be at least {MIN_SECRET_LENGTH} characters"
            )
        if not 4 <= self.BCRYPT_ROUNDS <= 31:
            raise ConfigurationError("BCRYPT_ROUNDS must be between 4 and 31")
        if len(self.EMPLOYEE_PASSWORD.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ConfigurationError(
                f"EMPLOYEE_PASSWORD must be at most {MAX_PASSWORD_BYTES} bytes"
            )
