"""Shared enums for token security results."""

from __future__ import annotations

from enum import Enum


class CollisionRisk(str, Enum):
    """Qualitative collision risk bucket derived from token entropy."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SecurityLevel(str, Enum):
    """Coarse classification combining entropy and collision probability."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class Provenance(str, Enum):
    """Which path produced a random byte string or digest."""

    SECURE = "secure"
    DEGRADED = "degraded"
