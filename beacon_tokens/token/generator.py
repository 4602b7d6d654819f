"""Token generation from the random source through the alphabet encoder."""

from __future__ import annotations

from typing import Optional

from ..core.metrics import SecurityMetricsTracker
from ..logging import get_logger
from ..randomness.source import RandomSource
from .encoder import TokenEncoder
from .types import GeneratedToken
from .validator import TokenValidator

logger = get_logger(__name__)


class TokenGenerator:
    """Issue short human-typeable tokens for beacon check-in sessions.

    A candidate that fails the entropy gate is logged and returned anyway.
    Regenerating would make termination depend on luck; callers that need a
    hard guarantee must re-validate and apply their own retry policy.
    """

    def __init__(
        self,
        *,
        random_source: RandomSource,
        encoder: TokenEncoder,
        validator: TokenValidator,
        tracker: Optional[SecurityMetricsTracker] = None,
    ) -> None:
        self.random_source = random_source
        self.encoder = encoder
        self.validator = validator
        self.tracker = tracker

    def generate(self) -> GeneratedToken:
        raw = self.random_source.next_bytes(self.encoder.token_length)
        token = self.encoder.encode(raw.data)

        validation = self.validator.validate(token, record_failures=False)
        if not validation.is_valid:
            logger.warning(
                "low_entropy_token_generated",
                reason=validation.error,
                entropy=validation.entropy,
            )

        if self.tracker is not None:
            self.tracker.record_generation(token, raw.provenance)
        return GeneratedToken(token=token, provenance=raw.provenance, validation=validation)
