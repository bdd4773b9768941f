"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers API routes.  The `uvicorn` ASGI server can point to
``text_bridge.main:app`` to serve the application.
"""

from fastapi import FastAPI
from loguru import logger

from . import __version__
from .utils.logger import setup_logging
from .controllers.bridge_controller import router as bridge_router
from .utils.error_handler import BridgeError, http_exception_handler


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    setup_logging()

    app = FastAPI(title="Text Bridge", version=__version__)

    # Register exception handler for BridgeError
    app.add_exception_handler(BridgeError, http_exception_handler)

    app.include_router(bridge_router)

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        logger.debug("Health check invoked")
        return {"status": "ok"}

    return app


# Create an application instance for ASGI servers
app = create_app()
