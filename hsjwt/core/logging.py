from __future__ import annotations

import logging
import re
import sys
from typing import Any

from loguru import logger

from hsjwt.settings import Settings

REDACTED = "<token>"

# three dot-separated base64url segments, as on the wire
_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_-]{8,}\.[A-Za-z0-9_-]{8,}\.[A-Za-z0-9_-]{8,}")


def redact_tokens(text: str) -> str:
    """Заменяет токены в тексте лога, чтобы они не попадали в журналы."""

    return _TOKEN_PATTERN.sub(REDACTED, text)


def _redact_record(record: dict[str, Any]) -> None:
    record["message"] = redact_tokens(record["message"])


class InterceptHandler(logging.Handler):
    """Перенаправляет стандартные логи (uvicorn, fastapi) в Loguru."""

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - инфраструктурный код
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(stdlib=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(settings: Settings) -> None:
    intercept_handler = InterceptHandler()
    logging.basicConfig(handlers=[intercept_handler], level=0, force=True)

    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [intercept_handler]
        logging_logger.propagate = False

    text_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[alg]} | "
        "{name}:{function}:{line} | {message}"
    )
    logger.configure(
        handlers=[
            {
                "sink": sys.stdout,
                "level": settings.log_level,
                "format": "{message}" if settings.log_json else text_format,
                "enqueue": True,
                "backtrace": settings.app_env != "prod",
                "diagnose": settings.app_env != "prod",
                "serialize": settings.log_json,
            }
        ],
        extra={"alg": settings.token_algorithm.value},
        patcher=_redact_record,
    )


def bind_logger(**extra: Any):
    return logger.bind(**extra)


__all__ = ["REDACTED", "bind_logger", "configure_logging", "logger", "redact_tokens"]
