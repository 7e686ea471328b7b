"""
Configuration for the DPP metrics aggregator.

Defaults match the operation-time buckets reported by the platform
telemetry; the environment may override them for experiments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import cache

from .errors import MetricsConfigError

# Operation time buckets, in seconds:
#   < 1
#   [1, 10)
#   [10, 25)
#   [25, 39)
#   >= 39  - which means timeout.
DEFAULT_DURATION_BUCKETS: tuple[int, ...] = (1, 10, 25, 39)

DURATION_BUCKETS_ENV = "DPP_METRICS_DURATION_BUCKETS"


def validate_boundaries(boundaries: tuple[int, ...], setting: str = "duration_buckets") -> None:
    """Raise MetricsConfigError unless boundaries are non-empty, positive and ascending."""
    if not boundaries:
        raise MetricsConfigError("At least one bucket boundary is required", setting)
    if boundaries[0] <= 0:
        raise MetricsConfigError(
            f"Bucket boundaries must be positive, got {boundaries[0]}", setting
        )
    for lower, upper in zip(boundaries, boundaries[1:], strict=False):
        if upper <= lower:
            raise MetricsConfigError(
                f"Bucket boundaries must be strictly ascending: {lower} >= {upper}", setting
            )


@dataclass(frozen=True)
class DppMetricsConfig:
    """Aggregator settings.

    Attributes:
        duration_buckets: Ascending operation-time boundaries in whole seconds
    """

    duration_buckets: tuple[int, ...] = DEFAULT_DURATION_BUCKETS

    def __post_init__(self) -> None:
        validate_boundaries(tuple(self.duration_buckets))


def parse_boundaries(raw: str) -> tuple[int, ...]:
    """Parse a comma-separated list of whole seconds, e.g. ``"1,10,25,39"``."""
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    try:
        boundaries = tuple(int(p) for p in parts)
    except ValueError as e:
        raise MetricsConfigError(
            f"{DURATION_BUCKETS_ENV} must be comma-separated integers, got {raw!r}",
            DURATION_BUCKETS_ENV,
        ) from e
    validate_boundaries(boundaries, DURATION_BUCKETS_ENV)
    return boundaries


@cache
def get_metrics_config() -> DppMetricsConfig:
    """Load metrics configuration from environment variables.

    Environment variables:
        - DPP_METRICS_DURATION_BUCKETS → duration_buckets (e.g. "1,10,25,39")

    Returns:
        DppMetricsConfig with validated settings.
    """
    raw = os.environ.get(DURATION_BUCKETS_ENV)
    if not raw:
        return DppMetricsConfig()
    return DppMetricsConfig(duration_buckets=parse_boundaries(raw))
