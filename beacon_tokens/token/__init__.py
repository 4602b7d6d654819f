"""Token encoding, generation, validation and sanitization."""

from .encoder import TokenEncoder
from .generator import TokenGenerator
from .sanitizer import TokenSanitizer, is_valid_format
from .types import GeneratedToken, TokenValidationResult, UniquenessReport
from .validator import TokenValidator

__all__ = [
    "TokenEncoder",
    "TokenGenerator",
    "TokenSanitizer",
    "TokenValidator",
    "GeneratedToken",
    "TokenValidationResult",
    "UniquenessReport",
    "is_valid_format",
]
