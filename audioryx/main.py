# ============================================================================
# FILE: audioryx/main.py
# ============================================================================
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from audioryx.api.guard import OwnershipGuard
from audioryx.api.v1.router import api_router
from audioryx.config import Settings
from audioryx.core.cache import RedisCache
from audioryx.core.errors import AudioryxError, InvalidInput
from audioryx.core.logging import setup_logging
from audioryx.core.storage import LocalUploadStore
from audioryx.db.session import Database
from audioryx.services.employee_service import EmployeeCredentials
from audioryx.services.token_service import TokenService
from audioryx.services.track_service import TrackService
from audioryx.services.upload_service import UploadService
from audioryx.services.user_service import UserService
import logging

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the upload directory, release the engine on exit"""
    logger.info(f"Starting {app.state.settings.APP_NAME}")
    app.state.database.create_all()
    app.state.upload_store.ensure_directory()
    yield
    logger.info(f"Shutting down {app.state.settings.APP_NAME}")
    app.state.database.dispose()

async def audioryx_error_handler(request: Request, exc: AudioryxError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": exc.detail},
        headers=exc.headers,
    )

async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=InvalidInput.status_code,
        content={"error": InvalidInput.error, "detail": problems or InvalidInput.detail},
    )

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and every shared service exactly once.

    Raises ConfigurationError when the signing secret is missing or weak,
    so the process refuses to start instead of signing with a default.
    """
    settings = settings or Settings()
    settings.check_security()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Audioryx API",
        description="Personal media backend: accounts, uploads, playlists and settings",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Shared, read-mostly state
    upload_store = LocalUploadStore(settings.UPLOAD_DIR, url_prefix=UPLOADS_URL_PREFIX)
    cache = RedisCache(settings.REDIS_URL, default_expire=settings.CACHE_EXPIRE_SECONDS)
    token_service = TokenService(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        user_ttl=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
        employee_ttl=timedelta(hours=settings.EMPLOYEE_TOKEN_EXPIRE_HOURS),
    )
    track_service = TrackService(cache)

    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.upload_store = upload_store
    app.state.cache = cache
    app.state.token_service = token_service
    app.state.guard = OwnershipGuard(token_service)
    app.state.user_service = UserService(settings.BCRYPT_ROUNDS)
    app.state.employee_credentials = EmployeeCredentials(
        settings.EMPLOYEE_EMAIL, settings.EMPLOYEE_PASSWORD, settings.BCRYPT_ROUNDS
    )
    app.state.track_service = track_service
    app.state.upload_service = UploadService(upload_store, track_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AudioryxError, audioryx_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(api_router, prefix="/api/v1")

    # Uploaded files are public by URL; names are only disclosed to their owner
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=str(upload_store.directory), check_dir=False),
        name="uploads",
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

def run() -> None:
    """Console entry point"""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "audioryx.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )

if __name__ == "__main__":
    run()
