"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_tracker.api.schemas import (
    ExerciseLogOut,
    ExerciseOut,
    UserOut,
    read_body_fields,
)
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_cors_origins
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.errors import StoreFailureError, TrackerError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Report unexpected store exceptions as ``StoreFailureError``."""
    try:
        yield
    except TrackerError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise StoreFailureError(message) from exc


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Exercise tracker starting")
        yield
        await app.state.container.close_resources()
        logger.info("Store resources released")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount(
        "/public",
        StaticFiles(directory=settings.public_dir, check_dir=False),
        name="public",
    )

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(
        request: Request, exc: TrackerError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> PlainTextResponse:
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return PlainTextResponse("Internal Server Error", status_code=500)

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        """Serve the landing page."""
        return FileResponse(Path(settings.views_dir) / "index.html")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/users")
    def create_user(
        request: Request, fields: dict[str, object] = Depends(read_body_fields)
    ) -> UserOut:
        """Register a new user."""
        state_container: AppContainer = request.app.state.container
        with store_errors("Error creating user"):
            user = state_container.user_service.register(fields)
        return UserOut.from_record(user)

    @app.get("/api/users")
    def list_users(request: Request) -> list[UserOut]:
        """Return every registered user."""
        state_container: AppContainer = request.app.state.container
        with store_errors("Error fetching users"):
            users = state_container.user_service.list_users()
        return [UserOut.from_record(user) for user in users]

    @app.post("/api/users/{user_id}/exercises")
    def add_exercise(
        user_id: str,
        request: Request,
        fields: dict[str, object] = Depends(read_body_fields),
    ) -> ExerciseOut:
        """Add an exercise entry for a user."""
        state_container: AppContainer = request.app.state.container
        with store_errors("Error adding exercise"):
            user, exercise = state_container.exercise_service.add_exercise(
                user_id, fields
            )
        return ExerciseOut.from_records(user, exercise)

    @app.get("/api/users/{user_id}/logs")
    def get_logs(
        user_id: str,
        request: Request,
        date_from: str | None = Query(default=None, alias="from"),
        date_to: str | None = Query(default=None, alias="to"),
        limit: str | None = None,
    ) -> ExerciseLogOut:
        """Return a user's exercise log, oldest first."""
        state_container: AppContainer = request.app.state.container
        params = {
            "from": date_from,
            "to": date_to,
            "limit": limit,
        }
        with store_errors("Error fetching logs"):
            log = state_container.exercise_service.get_log(user_id, params)
        return ExerciseLogOut.from_log(log)

    return app
