"""Core service and telemetry primitives."""

from .metrics import AlertThresholds, SecurityMetrics, SecurityMetricsTracker, build_alerts

__all__ = [
    "AlertThresholds",
    "SecurityMetrics",
    "SecurityMetricsTracker",
    "TokenSecurityService",
    "build_alerts",
]


def __getattr__(name: str):
    if name == "TokenSecurityService":
        from .service import TokenSecurityService

        return TokenSecurityService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
