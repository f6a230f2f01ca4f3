from __future__ import annotations

from fastapi import FastAPI

from hsjwt.api.routes import api_router
from hsjwt.core.logging import bind_logger, configure_logging
from hsjwt.settings import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    bind_logger(component="app").info(
        "Запуск приложения",
        env=settings.app_env,
        alg=settings.token_algorithm.value,
    )

    application = FastAPI(title="hsjwt token API", version="1.0.0")
    application.include_router(api_router)
    return application


__all__ = ["create_app"]
