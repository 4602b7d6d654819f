"""Running security telemetry and alert evaluation helpers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import List

from ..analysis.collision import classify_security_level, estimate_collision_probability
from ..analysis.entropy import calculate_entropy
from ..types import Provenance, SecurityLevel


@dataclass(frozen=True)
class SecurityMetrics:
    """Point-in-time copy of the aggregate token security counters."""

    token_entropy: float = 0.0
    collision_probability: float = 0.0
    unique_tokens_generated: int = 0
    validation_failures: int = 0
    security_level: SecurityLevel = SecurityLevel.MODERATE
    degraded_generations: int = 0


@dataclass
class AlertThresholds:
    """Threshold configuration for alert generation."""

    max_collision_probability: float = 1e-9
    min_token_entropy: float = 40.0
    max_validation_failure_rate: float = 0.25
    max_degraded_generations: int = 0


def ratio(numerator: int, denominator: int) -> float:
    """Safely compute a ratio in [0.0, 1.0]."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def build_alerts(snapshot: SecurityMetrics, thresholds: AlertThresholds) -> List[str]:
    """Build textual alerts from a snapshot and threshold policy."""
    alerts: List[str] = []
    if snapshot.unique_tokens_generated == 0 and snapshot.validation_failures == 0:
        return alerts

    if snapshot.unique_tokens_generated and snapshot.token_entropy < thresholds.min_token_entropy:
        alerts.append("token_entropy_below_threshold")
    if snapshot.collision_probability > thresholds.max_collision_probability:
        alerts.append("collision_probability_above_threshold")
    checked = snapshot.unique_tokens_generated + snapshot.validation_failures
    if ratio(snapshot.validation_failures, checked) > thresholds.max_validation_failure_rate:
        alerts.append("validation_failure_rate_above_threshold")
    if snapshot.degraded_generations > thresholds.max_degraded_generations:
        alerts.append("degraded_randomness_in_use")
    if snapshot.security_level is SecurityLevel.WEAK:
        alerts.append("security_level_weak")

    return alerts


class SecurityMetricsTracker:
    """Thread-safe aggregator owned by the service's composition root."""

    def __init__(self, *, key_space: int) -> None:
        if key_space <= 0:
            raise ValueError("key_space must be positive.")
        self.key_space = key_space
        self._lock = threading.Lock()
        self._metrics = SecurityMetrics()

    def record_generation(self, token: str, provenance: Provenance = Provenance.SECURE) -> SecurityMetrics:
        entropy = calculate_entropy(token)
        with self._lock:
            current = self._metrics
            generated = current.unique_tokens_generated + 1
            degraded = current.degraded_generations + (1 if provenance is Provenance.DEGRADED else 0)
            probability = estimate_collision_probability(generated, self.key_space)
            level = classify_security_level(entropy, probability)
            if degraded:
                # A non-cryptographic source was used at least once since reset.
                level = SecurityLevel.WEAK
            self._metrics = SecurityMetrics(
                token_entropy=entropy,
                collision_probability=probability,
                unique_tokens_generated=generated,
                validation_failures=current.validation_failures,
                security_level=level,
                degraded_generations=degraded,
            )
            return self._metrics

    def record_validation_failure(self) -> None:
        with self._lock:
            current = self._metrics
            self._metrics = replace(current, validation_failures=current.validation_failures + 1)

    def snapshot(self) -> SecurityMetrics:
        with self._lock:
            return self._metrics

    def reset(self) -> None:
        with self._lock:
            self._metrics = SecurityMetrics()
