"""Exceptions raised by the token security subsystem.

Validation failures are never raised; they are returned as
:class:`~beacon_tokens.token.types.TokenValidationResult` values.
"""

from __future__ import annotations


class TokenSecurityError(Exception):
    """Base class for all token security errors."""


class GenerationFailure(TokenSecurityError):
    """No usable random source is available and the fallback is disabled."""


class InvalidFormat(TokenSecurityError, ValueError):
    """A token failed the 12-character alphanumeric structural check."""

    def __init__(self, message: str = "Invalid token format for hashing", token: object = None) -> None:
        self.token = token
        super().__init__(message)


class DegradedSecurity(TokenSecurityError):
    """A fallback path is required but the environment forbids it."""
