"""
Tests for result formatting.
"""

from factcheck.core.models import VerdictClassification
from factcheck.integration.result_formatter import ResultFormatter
from factcheck.pipeline import FactCheckPipeline

CLIMATE_TEXT = ("Global temperatures have risen 1.1 degrees since pre-industrial "
                "times according to a new study.")


class TestResultFormatter:
    """Test text rendering of reports."""

    def setup_method(self):
        self.formatter = ResultFormatter()
        self.pipeline = FactCheckPipeline()

    def test_format_classification(self):
        assert self.formatter.format_classification(VerdictClassification.LIKELY_TRUE) == "Likely True"
        assert (self.formatter.format_classification(VerdictClassification.INSUFFICIENT_EVIDENCE)
                == "Insufficient Evidence")

    def test_summary_line(self):
        report = self.pipeline.analyze(CLIMATE_TEXT)
        assert self.formatter.format_summary_line(report) == "Likely True (60%, uncertainty 22%, 3 sources)"

    def test_summary_line_with_review(self):
        report = self.pipeline.analyze("The weather is nice today.")
        line = self.formatter.format_summary_line(report)

        assert line.startswith("Insufficient Evidence (24%, uncertainty 50%, 0 sources)")
        assert line.endswith("human review recommended")

    def test_format_report(self):
        report = self.pipeline.analyze(CLIMATE_TEXT)
        text = self.formatter.format_report(report)

        assert text.startswith("Verdict: Likely True")
        assert "Confidence interval: 50% - 70%" in text
        assert "Claims (1):" in text
        assert "[climate, priority 1.00]" in text
        assert "IPCC Climate Report 2023 (95% credible)" in text
        assert "Reasoning:" in text
        assert "Monitor for new contradicting evidence" in text
        assert "Time references" not in text

    def test_format_report_without_claims(self):
        report = self.pipeline.analyze("Yesterday the weather was nice.")
        text = self.formatter.format_report(report)

        assert "(no checkworthy claims detected)" in text
        assert "Evidence:" not in text
        assert "Time references: Yesterday" in text

    def test_truncate(self):
        formatter = ResultFormatter(max_excerpt_length=10)
        assert formatter._truncate("short") == "short"
        assert formatter._truncate("a much longer excerpt") == "a much lon..."
