"""Composition root for the token security service."""

from __future__ import annotations

from typing import Optional

from .config import TokenSecurityConfig
from .core.metrics import SecurityMetricsTracker
from .core.service import TokenSecurityService
from .randomness.source import RandomSource
from .session.base import SessionLookup
from .token.encoder import TokenEncoder
from .token.generator import TokenGenerator
from .token.sanitizer import TokenSanitizer
from .token.validator import TokenValidator
from .utils.hashing import TokenHasher


def create_token_service(
    config: Optional[TokenSecurityConfig] = None,
    *,
    random_source: Optional[RandomSource] = None,
    tracker: Optional[SecurityMetricsTracker] = None,
    hasher: Optional[TokenHasher] = None,
    session_lookup: Optional[SessionLookup] = None,
) -> TokenSecurityService:
    """Create a ready-to-use service with its own metrics tracker."""
    config = config or TokenSecurityConfig()
    tracker = tracker or SecurityMetricsTracker(key_space=config.key_space)
    validator = TokenValidator(
        tracker=tracker,
        token_length=config.token_length,
        min_entropy_bits=config.min_entropy_bits,
    )
    generator = TokenGenerator(
        random_source=random_source or RandomSource(allow_fallback=config.allow_insecure_random),
        encoder=TokenEncoder(alphabet=config.alphabet, token_length=config.token_length),
        validator=validator,
        tracker=tracker,
    )
    if session_lookup is None and config.database_dsn:
        from .session.postgres import PostgresSessionLookup

        session_lookup = PostgresSessionLookup(config.database_dsn)

    if hasher is None:
        hasher = TokenHasher(
            algorithm=config.hash_algorithm,
            production=config.is_production,
            token_length=config.token_length,
        )

    return TokenSecurityService(
        generator=generator,
        validator=validator,
        sanitizer=TokenSanitizer(token_length=config.token_length),
        hasher=hasher,
        tracker=tracker,
        session_lookup=session_lookup,
    )
