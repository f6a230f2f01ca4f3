from __future__ import annotations

from enum import Enum


class Algorithm(str, Enum):
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @property
    def width(self) -> int:
        """Hash width in bits used for the HMAC digest."""
        return _HASH_WIDTHS[self]


_HASH_WIDTHS = {
    Algorithm.HS256: 256,
    Algorithm.HS384: 384,
    Algorithm.HS512: 512,
}


class VerificationResult(str, Enum):
    valid = "valid"
    invalid = "invalid"
    expired = "expired"

    @property
    def is_valid(self) -> bool:
        return self is VerificationResult.valid


__all__ = [
    "Algorithm",
    "VerificationResult",
]
