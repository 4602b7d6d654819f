"""Utility helpers for hashing and time operations."""

from .hashing import TokenDigest, TokenHasher, rolling_hash_hex
from .time import ensure_utc, utc_now

__all__ = ["TokenDigest", "TokenHasher", "rolling_hash_hex", "ensure_utc", "utc_now"]
