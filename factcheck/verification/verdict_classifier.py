"""
Verdict classification with uncertainty.

Fuses semantic, credibility and consistency scores into one score, derives
an uncertainty measure from evidence disagreement and semantic ambiguity,
and maps the pair onto a verdict through an ordered decision table.
"""

import math
from typing import List, Optional, Tuple

from ..config import FactCheckConfig
from ..constants import ScoreDefaults
from ..core.models import (
    CredibilityAssessment,
    EvidenceGroup,
    SemanticAnalysis,
    Verdict,
    VerdictClassification,
)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


class VerdictClassifier:
    """
    Produces the final verdict for an analysis.

    The decision table is evaluated top to bottom and the first matching row
    wins; the last row catches everything, so ``classify`` is total.
    """

    def __init__(self, config: Optional[FactCheckConfig] = None):
        self.config = config or FactCheckConfig()

    def classify_evidence(self, evidence: List[EvidenceGroup], semantic: SemanticAnalysis,
                          credibility: CredibilityAssessment) -> Verdict:
        """
        Build the verdict from the earlier stages' outputs.

        Args:
            evidence: Evidence groups from the retriever
            semantic: Semantic analysis of the text and evidence
            credibility: Credibility assessment of the sources

        Returns:
            Verdict with score, uncertainty, interval and review flag
        """
        score = self.calculate_score(semantic, credibility)
        evidence_variance = self.calculate_evidence_variance(evidence)
        semantic_uncertainty = 1.0 - 2.0 * abs(semantic.semantic_similarity - 0.5)
        uncertainty = (evidence_variance + semantic_uncertainty) / 2.0
        conflicting = any(not source.supports for group in evidence for source in group.sources)

        classification, interval = self.classify(score, uncertainty)

        return Verdict(
            classification=classification,
            score=score,
            uncertainty_score=uncertainty,
            confidence_interval=interval,
            conflicting_evidence=conflicting,
            evidence_count=sum(len(group.sources) for group in evidence),
            requires_human_review=self.requires_human_review(uncertainty, conflicting),
            evidence_variance=evidence_variance,
            semantic_uncertainty=semantic_uncertainty,
        )

    def calculate_score(self, semantic: SemanticAnalysis, credibility: CredibilityAssessment) -> float:
        weights = self.config.weights
        score = (semantic.semantic_similarity * weights.semantic +
                 credibility.average_credibility * weights.credibility +
                 semantic.logical_consistency * weights.consistency)
        return _clamp(score)

    def calculate_evidence_variance(self, evidence: List[EvidenceGroup]) -> float:
        """Population standard deviation of source credibility; 1.0 without sources."""
        scores = [source.credibility for group in evidence for source in group.sources]
        if not scores:
            return ScoreDefaults.NO_EVIDENCE_VARIANCE

        mean = sum(scores) / len(scores)
        variance = sum((score - mean) ** 2 for score in scores) / len(scores)
        return math.sqrt(variance)

    def classify(self, score: float, uncertainty: float) -> Tuple[VerdictClassification, Tuple[float, float]]:
        """Map a (score, uncertainty) pair to a classification and confidence interval."""
        t = self.config.thresholds

        if score >= t.verified_true_score and uncertainty < t.verified_true_uncertainty:
            return VerdictClassification.VERIFIED_TRUE, self._interval(score, t.verified_true_margin)
        if score >= t.likely_true_score and uncertainty < t.likely_true_uncertainty:
            return VerdictClassification.LIKELY_TRUE, self._interval(score, t.likely_true_margin)
        if score <= t.likely_false_score and uncertainty < t.likely_false_uncertainty:
            return VerdictClassification.LIKELY_FALSE, self._interval(score, t.likely_false_margin)
        if score <= t.verified_false_score and uncertainty < t.verified_false_uncertainty:
            return VerdictClassification.VERIFIED_FALSE, self._interval(score, t.verified_false_margin)
        return VerdictClassification.INSUFFICIENT_EVIDENCE, self._interval(score, t.insufficient_margin)

    def requires_human_review(self, uncertainty: float, conflicting_evidence: bool) -> bool:
        return uncertainty > self.config.thresholds.human_review_uncertainty or conflicting_evidence

    def _interval(self, score: float, margin: float) -> Tuple[float, float]:
        return _clamp(score - margin), _clamp(score + margin)
