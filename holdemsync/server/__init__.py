"""
HoldemSync Server - FastAPI + WebSocket Relay Layer
"""

from holdemsync.server.app import app, create_app

__all__ = ["app", "create_app"]
