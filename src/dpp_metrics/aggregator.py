"""
Thread-safe aggregator for Wi-Fi Easy Connect (DPP) metrics.

Counts initiator/responder requests, successes and failures, and buckets
operation times into a fixed histogram. The reporting path reads the
aggregate through ``consolidate_snapshot`` or ``dump`` and resets it with
``clear`` (or ``drain`` for collect-and-reset).
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from .config import DppMetricsConfig
from .histogram import IntHistogram
from .snapshot import DppLogSnapshot, DppStatusBucket, HistogramBucketInt32
from .status import DppStatusType, failure_status_type, success_status_type

logger = logging.getLogger(__name__)

# Dump and snapshot order
COUNTER_NAMES: tuple[str, ...] = (
    "num_dpp_configurator_initiator_requests",
    "num_dpp_enrollee_initiator_requests",
    "num_dpp_enrollee_responder_requests",
    "num_dpp_enrollee_responder_success",
    "num_dpp_enrollee_success",
    "num_dpp_r1_capable_enrollee_responder_devices",
    "num_dpp_r2_capable_enrollee_responder_devices",
    "num_dpp_r2_enrollee_responder_incompatible_configuration",
)


class TextSink(Protocol):
    """Anything with a ``write(str)`` method (file, StringIO, sys.stdout)."""

    def write(self, s: str, /) -> object: ...


def _status_buckets(data: dict[DppStatusType, int]) -> tuple[DppStatusBucket, ...]:
    return tuple(DppStatusBucket(dpp_status_type=key, count=data[key]) for key in sorted(data))


class DppMetrics:
    """
    Easy Connect (DPP) metrics aggregator.

    All methods may be called concurrently; a single lock serializes every
    update, read and reset.

    Example:
        metrics = DppMetrics()

        metrics.record_configurator_initiator_request()
        metrics.record_failure(EasyConnectFailureStatus.FAILURE_TIMEOUT)
        metrics.record_operation_duration(2000)

        snapshot = metrics.consolidate_snapshot()
        metrics.dump(sys.stdout)
    """

    def __init__(self, config: DppMetricsConfig | None = None) -> None:
        self._config = config or DppMetricsConfig()
        self._lock = threading.Lock()

        self._counters: dict[str, int] = dict.fromkeys(COUNTER_NAMES, 0)
        self._failure_codes: dict[DppStatusType, int] = {}
        self._configurator_success_codes: dict[DppStatusType, int] = {}
        self._operation_time = IntHistogram(self._config.duration_buckets)

    @property
    def duration_buckets(self) -> tuple[int, ...]:
        """Operation-time bucket boundaries, in seconds."""
        return self._operation_time.boundaries

    # =========================================================================
    # Counters
    # =========================================================================

    def _increment(self, name: str) -> None:
        with self._lock:
            self._counters[name] += 1

    def record_configurator_initiator_request(self) -> None:
        """Count a configurator-initiator request."""
        self._increment("num_dpp_configurator_initiator_requests")

    def record_enrollee_initiator_request(self) -> None:
        """Count an enrollee-initiator request."""
        self._increment("num_dpp_enrollee_initiator_requests")

    def record_enrollee_responder_request(self) -> None:
        """Count an enrollee-responder request."""
        self._increment("num_dpp_enrollee_responder_requests")

    def record_enrollee_responder_success(self) -> None:
        """Count a successful enrollee-responder exchange."""
        self._increment("num_dpp_enrollee_responder_success")

    def record_enrollee_success(self) -> None:
        """Count an enrollee success."""
        self._increment("num_dpp_enrollee_success")

    def record_r1_capable_responder_device(self) -> None:
        """Count an R1-capable enrollee responder device."""
        self._increment("num_dpp_r1_capable_enrollee_responder_devices")

    def record_r2_capable_responder_device(self) -> None:
        """Count an R2-capable enrollee responder device."""
        self._increment("num_dpp_r2_capable_enrollee_responder_devices")

    def record_r2_incompatible_configuration(self) -> None:
        """
        Count an R2 compatibility check that found the enrollee responder
        incompatible with the network.
        """
        self._increment("num_dpp_r2_enrollee_responder_incompatible_configuration")

    # =========================================================================
    # Status histograms
    # =========================================================================

    def record_configurator_success(self, code: int) -> None:
        """
        Count a configurator success by status code.

        Only "configuration sent" and "configuration applied" are counted;
        other codes are ignored.

        Args:
            code: EasyConnectSuccessStatus value
        """
        status = success_status_type(code)
        if status is None:
            logger.debug("Ignoring unrecognized DPP success code %r", code)
            return
        with self._lock:
            counts = self._configurator_success_codes
            counts[status] = counts.get(status, 0) + 1

    def record_failure(self, code: int) -> None:
        """
        Count a failure by status code. Unrecognized codes are ignored.

        Args:
            code: EasyConnectFailureStatus value
        """
        status = failure_status_type(code)
        if status is None:
            logger.debug("Ignoring unrecognized DPP failure code %r", code)
            return
        with self._lock:
            self._failure_codes[status] = self._failure_codes.get(status, 0) + 1

    # =========================================================================
    # Operation time
    # =========================================================================

    def record_operation_duration(self, duration_ms: int) -> None:
        """
        Record the time an operation took to complete.

        Args:
            duration_ms: Duration in milliseconds. Truncated to whole seconds;
                negative or non-numeric values count as 0 seconds.
        """
        try:
            millis = int(duration_ms)
        except (TypeError, ValueError, OverflowError):
            logger.debug("Treating malformed DPP operation time %r as 0s", duration_ms)
            millis = 0
        if millis < 0:
            logger.debug("Clamping negative DPP operation time %dms to 0s", millis)
            millis = 0

        with self._lock:
            self._operation_time.increment(millis // 1000)

    # =========================================================================
    # Reporting
    # =========================================================================

    def _snapshot_locked(self) -> DppLogSnapshot:
        """Build a snapshot of the current state (must hold lock)."""
        return DppLogSnapshot(
            **self._counters,
            dpp_failure_code=_status_buckets(self._failure_codes),
            dpp_configurator_success_code=_status_buckets(self._configurator_success_codes),
            dpp_operation_time=tuple(
                HistogramBucketInt32(start=b.start, end=b.end, count=b.count)
                for b in self._operation_time.buckets()
            ),
        )

    def _clear_locked(self) -> None:
        for name in COUNTER_NAMES:
            self._counters[name] = 0
        self._failure_codes.clear()
        self._configurator_success_codes.clear()
        self._operation_time.clear()

    def dump_lines(self) -> list[str]:
        """Human-readable report, one entry per line."""
        return self.consolidate_snapshot().dump_lines()

    def dump(self, sink: TextSink) -> None:
        """
        Write a human-readable report of all metrics.

        Histograms are only written when they hold at least one sample.

        Args:
            sink: Writable text stream
        """
        lines = self.dump_lines()
        sink.write("\n".join(lines) + "\n")

    def consolidate_snapshot(self) -> DppLogSnapshot:
        """
        Copy every counter and histogram into an immutable snapshot.

        Does not reset anything; use ``clear`` or ``drain`` for that.
        """
        with self._lock:
            return self._snapshot_locked()

    def clear(self) -> None:
        """Reset all counters and empty all histograms."""
        with self._lock:
            self._clear_locked()
        logger.info("DPP metrics cleared")

    def drain(self) -> DppLogSnapshot:
        """
        Snapshot and reset in one step.

        No update can land between the snapshot and the reset.

        Returns:
            Metrics as they were before the reset
        """
        with self._lock:
            snapshot = self._snapshot_locked()
            self._clear_locked()
        logger.info("DPP metrics drained")
        return snapshot
