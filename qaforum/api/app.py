"""FastAPI web application for qaForum."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database

from qaforum.api.routers import account, admin, answers, auth, profile, questions
from qaforum.auth.jwt import TokenService
from qaforum.config import Settings, load_settings
from qaforum.database.database import build_client, init_db
from qaforum.errors import QAForumError

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Configuration (loaded from the environment when omitted)
        database: Already-open database to use instead of connecting to
            `settings.mongo_uri`

    Raises:
        ConfigurationError: If required configuration is missing
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if app.state.db is None:
            client = build_client(settings)
            app.state.db = client[settings.mongo_db_name]
        init_db(app.state.db)
        logger.info(f"qaForum started (environment={settings.environment})")
        yield
        if client is not None:
            client.close()
            logger.info("MongoDB connection closed")

    app = FastAPI(
        title="qaForum API",
        description="Question and answer forum backend",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_service = TokenService(settings.token)
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(QAForumError)
    async def qaforum_error_handler(request: Request, exc: QAForumError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong")

    for router in (auth.router, account.router, profile.router, questions.router, answers.router, admin.router):
        app.include_router(router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": VERSION}

    return app
