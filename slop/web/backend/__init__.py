"""FastAPI backend for scene analysis and prompt enhancement."""

from .app import create_app

__all__ = ["create_app"]
