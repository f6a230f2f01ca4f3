from __future__ import annotations

from fastapi import APIRouter

from hsjwt.api.dependencies import SettingsDep
from hsjwt.schemas.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: SettingsDep) -> HealthResponse:
    return HealthResponse(
        ok=True,
        env=settings.app_env,
        algorithm=settings.token_algorithm.value,
    )


__all__ = ["router"]
