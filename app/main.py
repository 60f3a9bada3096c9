import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.routers import config, newsletter, posts, stats
from app.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def log_integration_status(current_settings: Settings) -> None:
    status = current_settings.integration_status()
    for name, loaded in status.items():
        logger.info(f"{name}: {'loaded' if loaded else 'not available'}")

    if not all(status.values()):
        logger.warning("Some secrets are missing; related features are disabled")


def create_app(current_settings: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Blog API serving posts from {current_settings.posts_path}")
        log_integration_status(current_settings)
        yield

    app = FastAPI(
        title="Blog API",
        description="Markdown posts, newsletter signup and site stats",
        lifespan=lifespan,
    )

    app.include_router(config.router, prefix="/api")
    app.include_router(posts.router, prefix="/api")
    app.include_router(newsletter.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")

    # Mounted last so the API routes take precedence over static files.
    static_dir = current_settings.STATIC_DIR
    if static_dir and Path(static_dir).is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    elif static_dir:
        logger.warning(f"Static directory {static_dir} not found; not serving it")

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
