"""Base session lookup interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .types import SessionValidity


class SessionLookup(ABC):
    """Remote check of whether a token still maps to an open check-in session.

    Implementations make a single attempt; retries and backoff belong to the
    caller's network layer.
    """

    @abstractmethod
    async def lookup(self, token: str, *, timeout: Optional[float] = None) -> SessionValidity:
        """Return validity for one canonical token."""

    async def close(self) -> None:
        """Close lookup resources if needed."""
