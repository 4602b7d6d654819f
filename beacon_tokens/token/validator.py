"""Structural and entropy-based acceptance gate for tokens."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Optional

from ..analysis.entropy import assess_collision_risk, calculate_entropy
from ..config import MIN_ENTROPY_BITS, TOKEN_LENGTH
from ..logging import get_logger
from .types import TokenValidationResult

if TYPE_CHECKING:
    from ..core.metrics import SecurityMetricsTracker

logger = get_logger(__name__)

_ALNUM_RE = re.compile(r"[A-Za-z0-9]+")


class TokenValidator:
    """Validate tokens, first failing check wins.

    Never raises. Every rejection is counted on the attached tracker unless the
    caller passes ``record_failures=False``.
    """

    def __init__(
        self,
        *,
        tracker: Optional["SecurityMetricsTracker"] = None,
        token_length: int = TOKEN_LENGTH,
        min_entropy_bits: float = MIN_ENTROPY_BITS,
    ) -> None:
        self._tracker = tracker
        self.token_length = token_length
        self.min_entropy_bits = min_entropy_bits

    def validate(self, candidate: Any, *, record_failures: bool = True) -> TokenValidationResult:
        result = self._check(candidate)
        if not result.is_valid and record_failures:
            if self._tracker is not None:
                self._tracker.record_validation_failure()
            logger.info("token_validation_failed", reason=result.error, entropy=result.entropy)
        return result

    def _check(self, candidate: Any) -> TokenValidationResult:
        if not candidate or not isinstance(candidate, str):
            return TokenValidationResult(False, "Token must be a non-empty string")

        if len(candidate) != self.token_length:
            return TokenValidationResult(False, f"Token length must be exactly {self.token_length} characters")

        if _ALNUM_RE.fullmatch(candidate) is None:
            return TokenValidationResult(False, "Token contains invalid characters")

        entropy = calculate_entropy(candidate)
        collision_risk = assess_collision_risk(entropy)
        if entropy < self.min_entropy_bits:
            return TokenValidationResult(False, "Token entropy too low", entropy=entropy, collision_risk=collision_risk)

        return TokenValidationResult(True, entropy=entropy, collision_risk=collision_risk)
