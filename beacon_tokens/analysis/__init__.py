"""Entropy and collision analysis helpers."""

from .collision import classify_security_level, estimate_collision_probability, key_space_size
from .entropy import assess_collision_risk, calculate_entropy, shannon_entropy

__all__ = [
    "assess_collision_risk",
    "calculate_entropy",
    "classify_security_level",
    "estimate_collision_probability",
    "key_space_size",
    "shannon_entropy",
]
