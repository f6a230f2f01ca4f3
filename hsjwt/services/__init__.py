"""Domain services built on top of the token primitives."""

from hsjwt.services.auth import TokenAuthError, TokenService

__all__ = [
    "TokenAuthError",
    "TokenService",
]
