"""Main FastAPI application."""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from pydantic import ValidationError
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_database_url
from .container import Services, build_services, get_services
from .database import Database
from .errors import PersistenceError
from .routers import pages_router, urls_router
from .services.checker import LivenessChecker
from .templating import render

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Page Analyzer")

    db = app.state.services.db
    await db.create_all()
    logger.info("Database initialized")

    yield

    await db.dispose()
    logger.info("Shutdown complete")


def create_app(settings: Optional[Settings] = None, checker: Optional[LivenessChecker] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings are read from the environment when not given; a missing
    DATABASE_URL raises pydantic's ValidationError.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Page Analyzer",
        description="Register urls and check whether they respond",
        version="1.0.0",
        lifespan=lifespan,
    )

    db = Database(get_database_url(settings), timeout=settings.db_timeout)
    app.state.services = build_services(settings, db, checker)

    app.include_router(pages_router)
    app.include_router(urls_router)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return render(request, "errors/404.html", status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc}")
        return render(request, "errors/500.html", status_code=500)

    # Health check endpoint
    @app.get("/health")
    async def health_check(services: Services = Depends(get_services)):
        await services.db.execute(text("SELECT 1"))
        return {"status": "healthy"}

    return app


def main():
    """Console entry point: load settings and serve with uvicorn."""
    import uvicorn

    try:
        settings = Settings()
    except ValidationError as e:
        logger.critical(f"Invalid configuration, refusing to start: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.web_port)


if __name__ == "__main__":
    main()
