import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from .config import get_settings
from .errors import TaskServiceError
from .handlers import router
from .logging_setup import setup_logging
from .store import TaskStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(get_settings().log_level)
    logger.info("Tasks API started")
    yield
    logger.info(f"Tasks API shutting down with {len(app.state.store)} tasks in memory")


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Build the application around ``store``, or a fresh empty one."""
    app = FastAPI(title="Tasks API", lifespan=lifespan)
    app.state.store = store if store is not None else TaskStore()
    app.include_router(router)
    _register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} -> 500 ({elapsed_ms:.1f}ms)")
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaskServiceError)
    async def task_service_error_handler(request: Request, exc: TaskServiceError):
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


app = create_app()


def main():
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(
        "tasks_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
