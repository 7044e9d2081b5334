"""
FastAPI Application Entry Point for minipoker.

This module creates and configures the FastAPI application with:
- HTTP routes for round actions and state queries
- WebSocket endpoint for state pushes
- CORS middleware for development
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minipoker import __version__
from minipoker.server.routes import router
from minipoker.server.websocket import websocket_endpoint

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="minipoker",
        description="Single-table poker mini-game with an HTTP and WebSocket API",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    app.websocket("/ws")(websocket_endpoint)

    logger.info(f"minipoker {__version__} app created")
    return app


# Create the application instance
app = create_app()
