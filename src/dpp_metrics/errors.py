"""
Exceptions raised by the DPP metrics package.

Recording, dumping and snapshotting never raise; only configuration does.
"""

from __future__ import annotations


class DppMetricsError(Exception):
    """Base class for DPP metrics errors."""


class MetricsConfigError(DppMetricsError, ValueError):
    """Invalid metrics configuration (e.g. bad histogram boundaries)."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        super().__init__(message)
