"""Empirical Shannon entropy of individual tokens."""

from __future__ import annotations

import math
from collections import Counter

from ..types import CollisionRisk

LOW_RISK_BITS = 80.0
MEDIUM_RISK_BITS = 60.0


def shannon_entropy(text: str) -> float:
    """Return per-symbol Shannon entropy of ``text`` in bits."""
    if not text:
        return 0.0
    total = len(text)
    entropy = 0.0
    for count in Counter(text).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def calculate_entropy(token: str) -> float:
    """Return the token's total information content in bits.

    This is the empirical entropy of this particular string scaled by its
    length, not the entropy of the generating process: ``"AAAAAAAAAAAA"``
    scores 0 bits even if it came out of a uniform source.
    """
    return shannon_entropy(token) * len(token)


def assess_collision_risk(entropy_bits: float) -> CollisionRisk:
    if entropy_bits >= LOW_RISK_BITS:
        return CollisionRisk.LOW
    if entropy_bits >= MEDIUM_RISK_BITS:
        return CollisionRisk.MEDIUM
    return CollisionRisk.HIGH
