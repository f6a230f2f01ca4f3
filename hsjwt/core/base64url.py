from __future__ import annotations

import base64
import binascii
import re

from hsjwt.core.errors import DecodeError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str) -> bytes:
    """Decode unpadded base64url text, rejecting anything outside the alphabet."""

    if not isinstance(data, str) or not _ALPHABET.fullmatch(data):
        raise DecodeError("Segment is not base64url text")

    if len(data) % 4 == 1:
        raise DecodeError("Segment has an impossible base64url length")

    padding = "=" * (-len(data) % 4)
    try:
        decoded = base64.urlsafe_b64decode(data + padding)
    except binascii.Error as exc:  # pragma: no cover - alphabet and length already checked
        raise DecodeError("Segment is not base64url text") from exc

    # unused trailing bits must be zero
    if b64url_encode(decoded) != data:
        raise DecodeError("Segment is not canonical base64url")
    return decoded


__all__ = ["b64url_decode", "b64url_encode"]
