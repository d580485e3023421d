"""
Result formatting utilities.
Renders analysis reports as plain text for terminals and logs.
"""

from typing import List

from ..core.models import AnalysisReport, VerdictClassification


class ResultFormatter:
    """Formats analysis reports for human consumption."""

    def __init__(self, max_excerpt_length: int = 100):
        self.max_excerpt_length = max_excerpt_length

    def format_classification(self, classification: VerdictClassification) -> str:
        """'likely_true' -> 'Likely True'."""
        return ' '.join(word.capitalize() for word in classification.value.split('_'))

    def format_summary_line(self, report: AnalysisReport) -> str:
        verdict = report.verdict
        line = (f"{self.format_classification(verdict.classification)} "
                f"({verdict.score:.0%}, uncertainty {verdict.uncertainty_score:.0%}, "
                f"{verdict.evidence_count} sources)")
        if verdict.requires_human_review:
            line += " - human review recommended"
        return line

    def format_report(self, report: AnalysisReport) -> str:
        """
        Format a complete report as multi-line text.

        Args:
            report: Result of a pipeline run

        Returns:
            Formatted text
        """
        verdict = report.verdict
        low, high = verdict.confidence_interval
        lines: List[str] = [
            f"Verdict: {self.format_summary_line(report)}",
            f"Confidence interval: {low:.0%} - {high:.0%}",
            f"Summary: {report.explanation.summary}",
            "",
            f"Claims ({len(report.claims)}):",
        ]

        for claim in report.claims:
            lines.append(f"  - [{claim.category.value}, priority {claim.priority:.2f}] {claim.text}")
        if not report.claims:
            lines.append("  (no checkworthy claims detected)")

        if report.explanation.evidence_breakdown:
            lines.append("")
            lines.append("Evidence:")
            for breakdown in report.explanation.evidence_breakdown:
                lines.append(f"  {breakdown.claim_text}")
                lines.append(f"    {breakdown.supporting_sources} supporting, "
                             f"{breakdown.contradicting_sources} contradicting, "
                             f"avg. credibility {breakdown.average_credibility:.0%}")
                for source in breakdown.top_sources:
                    lines.append(f"    * {source.title} ({source.credibility:.0%} credible): "
                                 f"{self._truncate(source.excerpt)}")

        lines.append("")
        lines.append("Reasoning:")
        lines.extend(f"  {index}. {step}" for index, step in enumerate(report.explanation.reasoning_steps, 1))

        lines.append("")
        lines.append("Limitations:")
        lines.extend(f"  - {limitation}" for limitation in report.explanation.limitations)

        lines.append("")
        lines.append("Recommended actions:")
        lines.extend(f"  - {step}" for step in report.explanation.next_steps)

        if report.temporal_awareness.has_time_references:
            lines.append("")
            lines.append(f"Time references: {', '.join(report.temporal_awareness.time_references)}")

        return "\n".join(lines)

    def _truncate(self, text: str) -> str:
        if len(text) <= self.max_excerpt_length:
            return text
        return text[:self.max_excerpt_length] + "..."
