"""One-way digests of validated tokens for storage and comparison."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

from ..config import DEFAULT_HASH_ALGORITHM, TOKEN_LENGTH, check_digest_algorithm
from ..errors import DegradedSecurity, InvalidFormat
from ..logging import get_logger
from ..token.sanitizer import format_pattern, is_valid_format
from ..types import Provenance

logger = get_logger(__name__)

_INT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class TokenDigest:
    """Hex digest tagged with the path that produced it."""

    hexdigest: str
    algorithm: str
    provenance: Provenance

    @property
    def degraded(self) -> bool:
        return self.provenance is Provenance.DEGRADED


def rolling_hash_hex(value: str) -> str:
    """Return a non-cryptographic 32-bit rolling hash of ``value`` in hex.

    ``h = h * 31 + ord(ch)`` wrapped to a signed 32-bit integer, reported as
    the hex of its absolute value. Not collision resistant.
    """
    h = 0
    for ch in value:
        h = (h * 31 + ord(ch)) & _INT32_MASK
    if h & 0x80000000:
        h -= 1 << 32
    return format(abs(h), "x")


class TokenHasher:
    """Digest tokens with ``hashlib`` and fall back to a rolling hash.

    The fallback is only taken when the configured algorithm is unavailable in
    the running interpreter (for example a FIPS build without it). Outside
    production it is logged and tagged ``degraded``; in production it raises
    :class:`DegradedSecurity`.
    """

    def __init__(
        self,
        *,
        algorithm: str = DEFAULT_HASH_ALGORITHM,
        production: bool = False,
        token_length: int = TOKEN_LENGTH,
    ) -> None:
        check_digest_algorithm(algorithm)
        self.algorithm = algorithm
        self.production = production
        self._pattern = format_pattern(token_length)

    def hash(self, token: Any) -> TokenDigest:
        if not is_valid_format(token, self._pattern):
            raise InvalidFormat(token=token)

        data = token.encode("utf-8")
        try:
            digest = hashlib.new(self.algorithm, data)
        except ValueError as exc:
            if self.production:
                raise DegradedSecurity(f"Digest algorithm {self.algorithm!r} is unavailable.") from exc
            logger.warning("fallback_hash_used", algorithm=self.algorithm, reason=str(exc))
            return TokenDigest(hexdigest=rolling_hash_hex(token), algorithm="rolling32", provenance=Provenance.DEGRADED)
        return TokenDigest(hexdigest=digest.hexdigest(), algorithm=digest.name, provenance=Provenance.SECURE)

    def hexdigest(self, token: Any) -> str:
        return self.hash(token).hexdigest
