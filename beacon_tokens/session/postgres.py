"""PostgreSQL session lookup backed by the ``validate_session_expiration`` function."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any, Mapping, Optional

import asyncpg

from ..logging import get_logger
from ..utils.time import ensure_utc, utc_now
from .base import SessionLookup
from .types import SessionValidity

logger = get_logger(__name__)

LOOKUP_SQL = "SELECT * FROM validate_session_expiration($1)"


def session_from_row(row: Optional[Mapping[str, Any]], *, now: Optional[datetime] = None) -> SessionValidity:
    """Translate one ``validate_session_expiration`` row into a result."""
    if row is None:
        return SessionValidity.invalid("Session not found")

    raw_expiry = row.get("expires_at") or row.get("ends_at")
    if raw_expiry is None:
        return SessionValidity.invalid("Session has no expiry")

    expires_at = ensure_utc(raw_expiry)
    remaining_ms = int((expires_at - (now or utc_now())).total_seconds() * 1000)
    expired = remaining_ms <= 0
    return SessionValidity(
        is_valid=row.get("is_valid") is not False and not expired,
        expires_at=expires_at,
        time_remaining_ms=max(0, remaining_ms),
        session_age_s=row.get("session_age_seconds"),
        error="Session expired" if expired else None,
    )


class PostgresSessionLookup(SessionLookup):
    """Session lookup that queries PostgreSQL using ``asyncpg``."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        *,
        pool: Optional[asyncpg.Pool] = None,
        min_size: int = 1,
        max_size: int = 10,
    ) -> None:
        self._dsn = dsn
        self._pool = pool
        self._min_size = min_size
        self._max_size = max_size

    async def connect(self) -> None:
        """Initialize a connection pool if one was not supplied."""
        if self._pool is not None:
            return
        if not self._dsn:
            raise ValueError("Either `dsn` or `pool` must be provided for PostgresSessionLookup.")

        self._pool = await asyncpg.create_pool(
            dsn=self._dsn,
            min_size=self._min_size,
            max_size=self._max_size,
        )

    async def lookup(self, token: str, *, timeout: Optional[float] = None) -> SessionValidity:
        try:
            if self._pool is None:
                await self.connect()
            assert self._pool is not None
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(LOOKUP_SQL, token, timeout=timeout)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
            logger.warning("session_lookup_failed", error=str(exc) or type(exc).__name__)
            return SessionValidity.invalid(f"Validation failed: {exc}")
        return session_from_row(row)

    async def close(self) -> None:
        """Close the underlying pool if it exists."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
