"""Random byte sources with an explicit, observable non-cryptographic fallback."""

from __future__ import annotations

import random
import secrets
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import GenerationFailure
from ..logging import get_logger
from ..types import Provenance

logger = get_logger(__name__)

ByteProvider = Callable[[int], bytes]


@dataclass(frozen=True)
class RandomBytes:
    """Random bytes tagged with the path that produced them."""

    data: bytes
    provenance: Provenance

    @property
    def degraded(self) -> bool:
        return self.provenance is Provenance.DEGRADED


class RandomSource:
    """Operating system CSPRNG with a weaker ``random.Random`` fallback.

    ``secure_provider`` defaults to :func:`secrets.token_bytes`. When it raises
    ``NotImplementedError`` or ``OSError`` the source either degrades to a
    non-cryptographic generator (``allow_fallback=True``) or raises
    :class:`GenerationFailure`. There are no retries.
    """

    def __init__(
        self,
        *,
        secure_provider: Optional[ByteProvider] = None,
        allow_fallback: bool = True,
        fallback_rng: Optional[random.Random] = None,
    ) -> None:
        self._secure_provider = secure_provider or secrets.token_bytes
        self._allow_fallback = allow_fallback
        self._fallback_rng = fallback_rng or random.Random()

    def next_bytes(self, n: int) -> RandomBytes:
        if n < 0:
            raise ValueError("n must be non-negative.")
        try:
            data = self._secure_provider(n)
        except (NotImplementedError, OSError) as exc:
            if not self._allow_fallback:
                raise GenerationFailure("No cryptographic random source available.") from exc
            logger.warning("fallback_random_source_used", reason=str(exc) or type(exc).__name__, n_bytes=n)
            return RandomBytes(data=self._fallback_bytes(n), provenance=Provenance.DEGRADED)
        if len(data) != n:
            raise GenerationFailure(f"Random source returned {len(data)} bytes, expected {n}.")
        return RandomBytes(data=bytes(data), provenance=Provenance.SECURE)

    def _fallback_bytes(self, n: int) -> bytes:
        return bytes(self._fallback_rng.getrandbits(8) for _ in range(n))
