"""Boundary to the remote session-expiration lookup."""

from .base import SessionLookup
from .types import SessionValidity

__all__ = ["SessionLookup", "SessionValidity", "PostgresSessionLookup"]


def __getattr__(name: str):
    if name == "PostgresSessionLookup":
        from .postgres import PostgresSessionLookup

        return PostgresSessionLookup
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
