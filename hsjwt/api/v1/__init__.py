"""Versioned API routers."""

from hsjwt.api.v1.tokens import router as tokens_router

__all__ = ["tokens_router"]
