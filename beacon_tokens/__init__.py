"""Beacon check-in token security.

Generation, entropy and collision analysis, validation, sanitization and
hashing of the short codes broadcast for proximity-based attendance.
"""

from .bootstrap import create_token_service
from .config import GENERATION_ALPHABET, MIN_ENTROPY_BITS, TOKEN_LENGTH, TokenSecurityConfig
from .core.metrics import SecurityMetrics
from .core.service import TokenSecurityService
from .errors import DegradedSecurity, GenerationFailure, InvalidFormat, TokenSecurityError
from .token.types import TokenValidationResult
from .types import CollisionRisk, Provenance, SecurityLevel

__all__ = [
    "create_token_service",
    "TokenSecurityConfig",
    "TokenSecurityService",
    "TokenValidationResult",
    "SecurityMetrics",
    "CollisionRisk",
    "Provenance",
    "SecurityLevel",
    "TokenSecurityError",
    "GenerationFailure",
    "InvalidFormat",
    "DegradedSecurity",
    "GENERATION_ALPHABET",
    "MIN_ENTROPY_BITS",
    "TOKEN_LENGTH",
]
