"""Configuration models for token generation, validation and hashing."""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from typing import Optional

TOKEN_LENGTH = 12
# Uppercase letters and digits without 0, O, 1, I.
GENERATION_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
MIN_ENTROPY_BITS = 40.0
DEFAULT_HASH_ALGORITHM = "sha256"

DIGEST_SIZE_BYTES = 32

_TRUTHY = {"1", "true", "yes", "on"}


def check_digest_algorithm(name: str) -> None:
    """Reject available algorithms that do not produce a fixed 256-bit digest.

    Names unknown to this interpreter are allowed through; hashing degrades
    to the rolling hash for them.
    """
    try:
        digest = hashlib.new(name)
    except ValueError:
        return
    if digest.name.startswith("shake") or digest.digest_size != DIGEST_SIZE_BYTES:
        raise ValueError(f"hash_algorithm {name!r} must produce a fixed {DIGEST_SIZE_BYTES * 8}-bit digest.")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class TokenSecurityConfig:
    """Tunable knobs for the token security service."""

    token_length: int = TOKEN_LENGTH
    alphabet: str = GENERATION_ALPHABET
    min_entropy_bits: float = MIN_ENTROPY_BITS
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    allow_insecure_random: bool = True
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"
    database_dsn: Optional[str] = None

    def __post_init__(self) -> None:
        if self.token_length <= 0:
            raise ValueError("token_length must be positive.")
        if len(set(self.alphabet)) != len(self.alphabet) or len(self.alphabet) < 2:
            raise ValueError("alphabet must contain at least two distinct symbols.")
        if not self.alphabet.isalnum() or not self.alphabet.isascii():
            raise ValueError("alphabet must be ASCII alphanumeric.")
        check_digest_algorithm(self.hash_algorithm)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def key_space(self) -> int:
        """Number of distinct tokens the generation alphabet can produce."""
        return len(self.alphabet) ** self.token_length

    @classmethod
    def from_env(cls) -> "TokenSecurityConfig":
        """Build a config from ``BEACON_TOKENS_*`` environment variables."""
        return cls(
            min_entropy_bits=float(os.getenv("BEACON_TOKENS_MIN_ENTROPY_BITS", str(MIN_ENTROPY_BITS))),
            hash_algorithm=os.getenv("BEACON_TOKENS_HASH_ALGORITHM", DEFAULT_HASH_ALGORITHM),
            allow_insecure_random=_env_bool("BEACON_TOKENS_ALLOW_INSECURE_RANDOM", True),
            environment=os.getenv("BEACON_TOKENS_ENVIRONMENT", "development"),
            log_level=os.getenv("BEACON_TOKENS_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("BEACON_TOKENS_LOG_FORMAT", "console"),
            database_dsn=os.getenv("BEACON_TOKENS_DATABASE_DSN"),
        )
