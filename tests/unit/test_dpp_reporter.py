"""
Unit tests for DPP metrics reporting.
"""

import json

from dpp_metrics import (
    DppLogSnapshot,
    EasyConnectFailureStatus,
    EasyConnectSuccessStatus,
    MetricsReporter,
    ReportFormat,
)


class TestMetricsReporter:
    """Test report generation and formatting."""

    def test_generate_report_keeps_state(self, metrics):
        """A plain report does not reset the aggregator."""
        metrics.record_enrollee_success()
        report = MetricsReporter(metrics).generate_report()

        assert report.metrics.num_dpp_enrollee_success == 1
        assert not report.drained
        assert metrics.consolidate_snapshot().num_dpp_enrollee_success == 1

    def test_generate_report_with_reset(self, metrics):
        """A draining report empties the aggregator."""
        metrics.record_enrollee_success()
        report = MetricsReporter(metrics).generate_report(reset=True)

        assert report.metrics.num_dpp_enrollee_success == 1
        assert report.drained
        assert metrics.consolidate_snapshot() == DppLogSnapshot()

    def test_json_format(self, metrics):
        """JSON output round-trips through the json module."""
        metrics.record_configurator_initiator_request()
        metrics.record_failure(EasyConnectFailureStatus.FAILURE_NOT_SUPPORTED)
        reporter = MetricsReporter(metrics)

        data = json.loads(reporter.format(reporter.generate_report(), ReportFormat.JSON))

        assert data["version"] == "1.0"
        assert data["metrics"]["num_dpp_configurator_initiator_requests"] == 1
        assert data["metrics"]["dpp_failure_code"] == [{"dpp_status_type": 10, "count": 1}]

    def test_human_format(self, metrics):
        """Human output contains the diagnostic dump."""
        metrics.record_operation_duration(26000)
        reporter = MetricsReporter(metrics)

        text = reporter.format(reporter.generate_report(), ReportFormat.HUMAN)

        assert text.startswith("Timestamp: ")
        assert "---Easy Connect/DPP metrics---" in text
        assert "{[25,39)=1}" in text

    def test_markdown_format(self, metrics):
        """Markdown output has a table per non-empty histogram."""
        metrics.record_configurator_success(EasyConnectSuccessStatus.SUCCESS_CONFIGURATION_SENT)
        reporter = MetricsReporter(metrics)

        text = reporter.format(reporter.generate_report(), ReportFormat.MARKDOWN)

        assert "# Easy Connect/DPP Metrics" in text
        assert "| num_dpp_enrollee_success | 0 |" in text
        assert "## Configurator Success Codes" in text
        assert "| EASY_CONNECT_EVENT_SUCCESS_CONFIGURATION_SENT | 1 |" in text
        assert "## Failure Codes" not in text
        assert "## Operation Time (s)" not in text
