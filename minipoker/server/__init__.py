"""
minipoker Server - FastAPI + WebSocket Server Layer
"""

from minipoker.server.app import app, create_app

__all__ = ["app", "create_app"]
