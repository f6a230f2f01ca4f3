from __future__ import annotations

import json
from typing import Any

from hsjwt.core.errors import ParseError, SerializationError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def serialize(obj: Any) -> bytes:
    """Compact UTF-8 JSON; keys are emitted exactly as the object holds them."""

    try:
        text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Object is not JSON serializable: {exc}") from exc
    return text.encode("utf-8")


def deserialize(data: bytes) -> Any:
    try:
        return json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise ParseError(f"Segment is not valid JSON: {exc}") from exc


__all__ = ["deserialize", "serialize"]
