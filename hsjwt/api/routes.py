from __future__ import annotations

from fastapi import APIRouter

from hsjwt.api.health import router as health_router
from hsjwt.api.v1.tokens import router as tokens_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(tokens_router)

__all__ = ["api_router"]
