"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..types import CollisionRisk, Provenance


@dataclass(frozen=True)
class TokenValidationResult:
    is_valid: bool
    error: Optional[str] = None
    entropy: Optional[float] = None
    collision_risk: Optional[CollisionRisk] = None


@dataclass(frozen=True)
class GeneratedToken:
    """A freshly generated token plus how it was produced and how it scored."""

    token: str
    provenance: Provenance
    validation: TokenValidationResult

    @property
    def degraded(self) -> bool:
        return self.provenance is Provenance.DEGRADED


@dataclass(frozen=True)
class UniquenessReport:
    sample_size: int
    unique_tokens: int
    duplicates: int
    collision_rate: float
    average_entropy: float
