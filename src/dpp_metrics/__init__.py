"""
Metrics for Wi-Fi Easy Connect (DPP).

Provides a thread-safe aggregator for DPP request, success and failure
counters and an operation-time histogram, with snapshot export and
human-readable diagnostic dumps.
"""

from .aggregator import DppMetrics
from .config import DEFAULT_DURATION_BUCKETS, DppMetricsConfig, get_metrics_config
from .errors import DppMetricsError, MetricsConfigError
from .histogram import IntHistogram
from .reporter import DppReport, MetricsReporter, ReportFormat
from .snapshot import DppLogSnapshot, DppStatusBucket, HistogramBucketInt32
from .status import DppStatusType, EasyConnectFailureStatus, EasyConnectSuccessStatus

__version__ = "1.0.0"

__all__ = [
    # Aggregation
    "DppMetrics",
    "IntHistogram",
    # Export
    "DppLogSnapshot",
    "DppStatusBucket",
    "HistogramBucketInt32",
    "DppReport",
    "MetricsReporter",
    "ReportFormat",
    # Status codes
    "DppStatusType",
    "EasyConnectFailureStatus",
    "EasyConnectSuccessStatus",
    # Configuration
    "DEFAULT_DURATION_BUCKETS",
    "DppMetricsConfig",
    "get_metrics_config",
    # Errors
    "DppMetricsError",
    "MetricsConfigError",
]
