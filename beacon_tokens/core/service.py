"""Facade over generation, validation, hashing and session checks."""

from __future__ import annotations

from typing import Any, List, Optional

from ..analysis.entropy import calculate_entropy
from ..session.base import SessionLookup
from ..session.types import SessionValidity
from ..token.generator import TokenGenerator
from ..token.sanitizer import TokenSanitizer
from ..token.types import GeneratedToken, TokenValidationResult, UniquenessReport
from ..token.validator import TokenValidator
from ..utils.hashing import TokenDigest, TokenHasher
from .metrics import AlertThresholds, SecurityMetrics, SecurityMetricsTracker, build_alerts


class TokenSecurityService:
    """Entry point for the token security operations.

    Build instances with :func:`beacon_tokens.create_token_service`; every
    collaborator, the metrics tracker included, is injected.
    """

    def __init__(
        self,
        *,
        generator: TokenGenerator,
        validator: TokenValidator,
        sanitizer: TokenSanitizer,
        hasher: TokenHasher,
        tracker: SecurityMetricsTracker,
        session_lookup: Optional[SessionLookup] = None,
    ) -> None:
        self.generator = generator
        self.validator = validator
        self.sanitizer = sanitizer
        self.hasher = hasher
        self.tracker = tracker
        self.session_lookup = session_lookup

    def generate(self) -> GeneratedToken:
        """Generate a token and keep its provenance and validation result."""
        return self.generator.generate()

    def generate_token(self) -> str:
        return self.generator.generate().token

    def validate_token(self, token: Any) -> TokenValidationResult:
        return self.validator.validate(token)

    def is_valid_format(self, token: Any) -> bool:
        return self.sanitizer.is_valid_format(token)

    def sanitize_token(self, raw: Any) -> Optional[str]:
        return self.sanitizer.sanitize(raw)

    def digest_token(self, token: Any) -> TokenDigest:
        return self.hasher.hash(token)

    def hash_token(self, token: Any) -> str:
        return self.hasher.hexdigest(token)

    def get_security_metrics(self) -> SecurityMetrics:
        return self.tracker.snapshot()

    def reset_metrics(self) -> None:
        self.tracker.reset()

    def security_alerts(self, thresholds: Optional[AlertThresholds] = None) -> List[str]:
        return build_alerts(self.tracker.snapshot(), thresholds or AlertThresholds())

    def measure_uniqueness(self, sample_size: int = 10_000) -> UniquenessReport:
        """Generate ``sample_size`` tokens and count duplicates among them.

        Tokens go through the normal generation path, so the batch is recorded
        in the security metrics.
        """
        if sample_size <= 0:
            raise ValueError("sample_size must be positive.")
        seen: set[str] = set()
        duplicates = 0
        total_entropy = 0.0
        for _ in range(sample_size):
            token = self.generate_token()
            if token in seen:
                duplicates += 1
            else:
                seen.add(token)
            total_entropy += calculate_entropy(token)

        return UniquenessReport(
            sample_size=sample_size,
            unique_tokens=len(seen),
            duplicates=duplicates,
            collision_rate=duplicates / sample_size,
            average_entropy=total_entropy / sample_size,
        )

    async def validate_session(self, raw_token: Any, *, timeout: Optional[float] = None) -> SessionValidity:
        """Sanitize a received token and ask the session lookup whether it is live."""
        if self.session_lookup is None:
            raise RuntimeError("No session lookup configured for this service.")

        token = self.sanitizer.sanitize(raw_token)
        if token is None:
            self.tracker.record_validation_failure()
            return SessionValidity.invalid("Invalid token format")
        return await self.session_lookup.lookup(token, timeout=timeout)
