"""
Tests for explanation generation.
"""

import pytest

from factcheck.core.models import (
    EvidenceGroup,
    EvidenceSource,
    SemanticAnalysis,
    Verdict,
    VerdictClassification,
)
from factcheck.integration.explanation_generator import (
    BASE_LIMITATIONS,
    CONFLICTING_EVIDENCE_LIMITATION,
    ExplanationGenerator,
    HIGH_UNCERTAINTY_LIMITATION,
    INSUFFICIENT_EVIDENCE_STEPS,
    MONITORING_STEPS,
    REVIEW_STEPS,
    SUMMARIES,
)


def make_verdict(classification=VerdictClassification.LIKELY_TRUE, score=0.62, uncertainty=0.2,
                 conflicting=False, review=False):
    return Verdict(
        classification=classification,
        score=score,
        uncertainty_score=uncertainty,
        confidence_interval=(max(score - 0.1, 0.0), min(score + 0.1, 1.0)),
        conflicting_evidence=conflicting,
        evidence_count=3,
        requires_human_review=review,
    )


def make_source(title, credibility, supports=True):
    return EvidenceSource(title=title, credibility=credibility, supports=supports, excerpt="excerpt",
                          relevance_score=0.5, temporal_score=0.5)


class TestSummaryAndSteps:
    """Test summary, limitations and next steps."""

    def setup_method(self):
        self.generator = ExplanationGenerator()

    @pytest.mark.parametrize("classification", list(VerdictClassification))
    def test_every_classification_has_a_summary(self, classification):
        summary = self.generator.generate_summary(make_verdict(classification))
        assert summary == SUMMARIES[classification]

    def test_base_limitations_only(self):
        assert self.generator.generate_limitations(make_verdict()) == BASE_LIMITATIONS

    def test_high_uncertainty_and_conflict_limitations(self):
        verdict = make_verdict(uncertainty=0.45, conflicting=True, review=True)
        limitations = self.generator.generate_limitations(verdict)

        assert limitations[:2] == BASE_LIMITATIONS
        assert limitations[2:] == [HIGH_UNCERTAINTY_LIMITATION, CONFLICTING_EVIDENCE_LIMITATION]

    def test_limitations_do_not_mutate_defaults(self):
        self.generator.generate_limitations(make_verdict(uncertainty=0.9))
        assert len(BASE_LIMITATIONS) == 2

    def test_review_steps_take_precedence(self):
        verdict = make_verdict(VerdictClassification.INSUFFICIENT_EVIDENCE, review=True)
        assert self.generator.generate_next_steps(verdict) == REVIEW_STEPS

    def test_insufficient_evidence_steps(self):
        verdict = make_verdict(VerdictClassification.INSUFFICIENT_EVIDENCE)
        assert self.generator.generate_next_steps(verdict) == INSUFFICIENT_EVIDENCE_STEPS

    def test_monitoring_steps(self):
        assert self.generator.generate_next_steps(make_verdict()) == MONITORING_STEPS


class TestReasoningSteps:
    """Test reasoning step text."""

    def setup_method(self):
        self.generator = ExplanationGenerator()

    def test_steps_without_multi_hop(self):
        semantic = SemanticAnalysis(semantic_similarity=0.2083, logical_consistency=0.8)
        steps = self.generator.generate_reasoning_steps(semantic, make_verdict(score=0.6023, uncertainty=0.2166))

        assert steps == [
            "Semantic similarity analysis: 20.8%",
            "Logical consistency check: 80.0%",
            "Final confidence score: 60.2%",
            "Uncertainty measure: 21.7%",
        ]

    def test_multi_hop_note(self):
        semantic = SemanticAnalysis(requires_multi_hop=True)
        steps = self.generator.generate_reasoning_steps(semantic, make_verdict())

        assert len(steps) == 5
        assert steps[2].startswith("Multi-hop reasoning required")


class TestEvidenceBreakdown:
    """Test per-group breakdowns."""

    def setup_method(self):
        self.generator = ExplanationGenerator()

    def test_breakdown(self):
        group = EvidenceGroup(claim_id="Claim...", claim_text="Claim", topic="topic", sources=(
            make_source("Low", 0.5),
            make_source("High", 0.9),
            make_source("Mid", 0.7, supports=False),
        ))
        breakdown = self.generator.generate_evidence_breakdown([group])[0]

        assert breakdown.claim_text == "Claim..."
        assert breakdown.supporting_sources == 2
        assert breakdown.contradicting_sources == 1
        assert breakdown.average_credibility == pytest.approx(0.7)
        assert [source.title for source in breakdown.top_sources] == ["High", "Mid"]
        # Source order in the group is untouched
        assert [source.title for source in group.sources] == ["Low", "High", "Mid"]

    def test_empty_group(self):
        group = EvidenceGroup(claim_id="Claim...", claim_text="Claim", topic="topic")
        breakdown = self.generator.generate_evidence_breakdown([group])[0]

        assert breakdown.average_credibility == 0.0
        assert breakdown.top_sources == []

    def test_generate(self):
        explanation = self.generator.generate(make_verdict(), [], SemanticAnalysis())

        assert explanation.summary == SUMMARIES[VerdictClassification.LIKELY_TRUE]
        assert explanation.evidence_breakdown == []
        assert explanation.next_steps == MONITORING_STEPS
