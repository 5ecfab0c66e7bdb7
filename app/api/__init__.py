"""HTTP API: JSON endpoints under /api and their dependencies."""

from app.api.router import api_router

__all__ = ["api_router"]
