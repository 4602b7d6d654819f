"""Session validity datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SessionValidity:
    """Result of a remote session-expiration lookup."""

    is_valid: bool
    expires_at: Optional[datetime] = None
    time_remaining_ms: Optional[int] = None
    session_age_s: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def invalid(cls, error: str) -> "SessionValidity":
        return cls(is_valid=False, error=error)
