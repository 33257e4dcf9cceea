"""
FastAPI Application Entry Point for HoldemSync.

This module creates and configures the FastAPI application with:
- HTTP routes for room management
- WebSocket relay endpoint for host/guest messages
- CORS middleware for development
"""

from typing import Optional
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holdemsync import __version__
from holdemsync.core.rules import TableConfig
from holdemsync.server.config import table_config_from_env
from holdemsync.server.routes import router
from holdemsync.server.websocket import RoomManager, websocket_endpoint

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(default_config: Optional[TableConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        default_config: Table settings for rooms created without overrides;
            read from the environment when not given

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="HoldemSync",
        description="Texas Hold'em host/guest relay with WebSocket API",
        version=__version__,
    )

    app.state.room_manager = RoomManager(default_config or table_config_from_env())
    logger.info(f"Default table: {app.state.room_manager.default_config}")

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include HTTP routes
    app.include_router(router)

    # WebSocket endpoint
    app.websocket("/ws/{room_id}")(websocket_endpoint)

    return app


# Create the application instance
app = create_app()
