"""
Metrics reporter for Easy Connect (DPP).

Generates machine-readable (JSON) and human-readable reports from a
``DppMetrics`` aggregator, for a periodic telemetry flush or a diagnostics page.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from .aggregator import DppMetrics
from .snapshot import DppLogSnapshot

logger = logging.getLogger(__name__)


def _section(title: str, column: str) -> list[str]:
    return ["", f"## {title}", "", f"| {column} | Count |", f"|{'-' * (len(column) + 2)}|-------|"]


class ReportFormat(StrEnum):
    """Output format for metrics reports."""

    JSON = "json"
    HUMAN = "human"
    MARKDOWN = "markdown"


@dataclass
class DppReport:
    """
    A timestamped DPP metrics report.

    Machine-readable format suitable for a telemetry pipeline.
    """

    metrics: DppLogSnapshot
    version: str = "1.0"
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())
    drained: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "version": self.version,
            "timestamp": self.timestamp,
            "drained": self.drained,
            "metrics": self.metrics.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)


class MetricsReporter:
    """
    Generate reports from a DPP metrics aggregator.

    Example:
        reporter = MetricsReporter(metrics)
        report = reporter.generate_report()

        # Output formats
        print(reporter.format_human(report))
        print(reporter.format_json(report))

        # Periodic telemetry flush
        payload = reporter.format_json(reporter.generate_report(reset=True))
    """

    def __init__(self, metrics: DppMetrics) -> None:
        """
        Initialize reporter.

        Args:
            metrics: Aggregator to report from
        """
        self.metrics = metrics

    def generate_report(self, reset: bool = False) -> DppReport:
        """
        Generate a report from current metrics.

        Args:
            reset: Drain the aggregator (snapshot and clear atomically)

        Returns:
            DppReport with all metrics
        """
        if reset:
            snapshot = self.metrics.drain()
        else:
            snapshot = self.metrics.consolidate_snapshot()
        logger.debug("Generated DPP metrics report (reset=%s)", reset)
        return DppReport(metrics=snapshot, drained=reset)

    def format_json(self, report: DppReport, indent: int = 2) -> str:
        """Format report as JSON."""
        return report.to_json(indent=indent)

    def format_human(self, report: DppReport) -> str:
        """Format report as human-readable text."""
        lines = [f"Timestamp: {report.timestamp}", *report.metrics.dump_lines()]
        return "\n".join(lines)

    def format_markdown(self, report: DppReport) -> str:
        """Format report as Markdown."""
        snapshot = report.metrics
        lines = [
            "# Easy Connect/DPP Metrics",
            "",
            f"**Timestamp:** {report.timestamp}",
            "",
            "## Counters",
            "",
            "| Counter | Value |",
            "|---------|-------|",
        ]
        lines.extend(f"| {name} | {value} |" for name, value in snapshot.counters().items())

        if snapshot.dpp_failure_code:
            lines.extend(_section("Failure Codes", "Status"))
            lines.extend(
                f"| {b.dpp_status_type.name} | {b.count} |" for b in snapshot.dpp_failure_code
            )

        if snapshot.dpp_configurator_success_code:
            lines.extend(_section("Configurator Success Codes", "Status"))
            lines.extend(
                f"| {b.dpp_status_type.name} | {b.count} |"
                for b in snapshot.dpp_configurator_success_code
            )

        if snapshot.dpp_operation_time:
            lines.extend(_section("Operation Time (s)", "Bucket"))
            lines.extend(f"| {b.label} | {b.count} |" for b in snapshot.dpp_operation_time)

        lines.append("")
        return "\n".join(lines)

    def format(self, report: DppReport, fmt: ReportFormat = ReportFormat.JSON) -> str:
        """
        Format report in specified format.

        Args:
            report: Report to format
            fmt: Output format

        Returns:
            Formatted string
        """
        if fmt == ReportFormat.JSON:
            return self.format_json(report)
        elif fmt == ReportFormat.HUMAN:
            return self.format_human(report)
        elif fmt == ReportFormat.MARKDOWN:
            return self.format_markdown(report)
        else:
            return self.format_json(report)
