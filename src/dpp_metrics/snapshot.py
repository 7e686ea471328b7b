"""
Immutable export record for DPP metrics.

Field names mirror the ``WifiDppLog`` telemetry record so a snapshot can be
handed to the telemetry pipeline field-for-field.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .status import DppStatusType

DUMP_HEADER = "---Easy Connect/DPP metrics---"
DUMP_FOOTER = "---End of Easy Connect/DPP metrics---"


class DppStatusBucket(BaseModel):
    """Occurrences of one status type."""

    model_config = ConfigDict(frozen=True)

    dpp_status_type: DppStatusType = Field(description="Exported status type")
    count: int = Field(ge=0, description="Number of occurrences")


class HistogramBucketInt32(BaseModel):
    """One non-empty bucket of an integer histogram, covering [start, end)."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(description="Inclusive lower bound")
    end: int | None = Field(default=None, description="Exclusive upper bound; None is unbounded")
    count: int = Field(ge=0, description="Number of samples in the bucket")

    @property
    def label(self) -> str:
        end = "inf" if self.end is None else str(self.end)
        return f"[{self.start},{end})"


class DppLogSnapshot(BaseModel):
    """
    Point-in-time copy of every DPP counter and histogram.

    Histogram tuples contain one entry per key that has been incremented,
    ordered by status value (or bucket start for operation time).
    """

    model_config = ConfigDict(frozen=True)

    num_dpp_configurator_initiator_requests: int = 0
    num_dpp_enrollee_initiator_requests: int = 0
    num_dpp_enrollee_responder_requests: int = 0
    num_dpp_enrollee_responder_success: int = 0
    num_dpp_enrollee_success: int = 0
    num_dpp_r1_capable_enrollee_responder_devices: int = 0
    num_dpp_r2_capable_enrollee_responder_devices: int = 0
    num_dpp_r2_enrollee_responder_incompatible_configuration: int = 0

    dpp_failure_code: tuple[DppStatusBucket, ...] = ()
    dpp_configurator_success_code: tuple[DppStatusBucket, ...] = ()
    dpp_operation_time: tuple[HistogramBucketInt32, ...] = ()

    def failure_counts(self) -> dict[DppStatusType, int]:
        """Failure histogram as a mapping."""
        return {b.dpp_status_type: b.count for b in self.dpp_failure_code}

    def success_counts(self) -> dict[DppStatusType, int]:
        """Configurator success histogram as a mapping."""
        return {b.dpp_status_type: b.count for b in self.dpp_configurator_success_code}

    def counters(self) -> dict[str, int]:
        """All scalar counters by field name."""
        return {
            name: getattr(self, name) for name in type(self).model_fields if name.startswith("num_")
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def dump_lines(self) -> list[str]:
        """
        Diagnostic dump, one entry per line.

        Every counter is listed; a histogram is only listed when it holds at
        least one sample.
        """
        lines = [DUMP_HEADER]
        lines.extend(f"{name}={value}" for name, value in self.counters().items())

        if self.dpp_failure_code:
            lines.append("dpp_failure_code=")
            lines.append(_format_status_buckets(self.dpp_failure_code))

        if self.dpp_configurator_success_code:
            lines.append("dpp_configurator_success_code=")
            lines.append(_format_status_buckets(self.dpp_configurator_success_code))

        if any(b.count > 0 for b in self.dpp_operation_time):
            lines.append("dpp_operation_time=")
            lines.append(
                "{" + ", ".join(f"{b.label}={b.count}" for b in self.dpp_operation_time) + "}"
            )

        lines.append(DUMP_FOOTER)
        return lines


def _format_status_buckets(buckets: tuple[DppStatusBucket, ...]) -> str:
    return "{" + ", ".join(f"{b.dpp_status_type.name}={b.count}" for b in buckets) + "}"
