"""Birthday-paradox collision estimates and security level classification."""

from __future__ import annotations

from ..types import SecurityLevel

STRONG_MIN_BITS = 80.0
STRONG_MAX_COLLISION = 1e-12
MODERATE_MIN_BITS = 60.0
MODERATE_MAX_COLLISION = 1e-9


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def key_space_size(alphabet_size: int, token_length: int) -> int:
    """Return the number of distinct tokens of ``token_length`` symbols."""
    if alphabet_size <= 0 or token_length <= 0:
        raise ValueError("alphabet_size and token_length must be positive.")
    return alphabet_size**token_length


def estimate_collision_probability(issued_count: int, key_space: int) -> float:
    """Approximate the probability of any collision among ``issued_count`` tokens.

    Uses ``P ~= n^2 / (2N)``, which is accurate while ``P`` is small. The
    result is clamped to ``[0, 1]`` for very large batches.
    """
    if issued_count <= 1:
        return 0.0
    if key_space <= 0:
        raise ValueError("key_space must be positive.")
    return clamp01((issued_count * issued_count) / (2 * key_space))


def classify_security_level(entropy_bits: float, collision_probability: float) -> SecurityLevel:
    if entropy_bits >= STRONG_MIN_BITS and collision_probability < STRONG_MAX_COLLISION:
        return SecurityLevel.STRONG
    if entropy_bits >= MODERATE_MIN_BITS and collision_probability < MODERATE_MAX_COLLISION:
        return SecurityLevel.MODERATE
    return SecurityLevel.WEAK
