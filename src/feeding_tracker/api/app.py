"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from feeding_tracker.api.babies import router as babies_router
from feeding_tracker.api.foods import router as foods_router
from feeding_tracker.app_logging import configure_logging
from feeding_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Feeding Tracker")
    app.state.container = container

    app.include_router(babies_router)
    app.include_router(foods_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info("Feeding tracker API ready (%s)", container.settings.environment)
    return app
