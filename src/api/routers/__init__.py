"""API routers."""

from api.routers import brands, pronunciation

__all__ = ["brands", "pronunciation"]
