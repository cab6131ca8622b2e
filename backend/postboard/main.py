"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.api import api_router
from postboard.core.config import Settings, get_settings
from postboard.core.logging_config import setup_logging
from postboard.core.security import PasswordHasher, SessionSigner
from postboard.db.store import JsonStore, StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store.initialize()
    logger.info("Using data directory %s", app.state.store.data_dir.resolve())
    yield


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Submitted values are never echoed back; they may be passwords.
    errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request body", "errors": jsonable_encoder(errors)},
    )


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure while handling %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around explicit settings."""

    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if settings.secret_key == "change-me":
        logger.warning("POSTBOARD_SECRET_KEY is not set; session tokens are signed with the default secret")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.store = JsonStore(settings.data_dir)
    app.state.password_hasher = PasswordHasher.from_settings(settings)
    app.state.session_signer = SessionSigner.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": f"{settings.app_name} API running"}

    app.include_router(api_router)
    return app


app = create_app()
