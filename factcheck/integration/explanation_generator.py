"""
Explanation generation for verdicts.
Turns the verdict and intermediate scores into readable text.
"""

from typing import Dict, List, Optional

from ..config import FactCheckConfig
from ..core.models import (
    EvidenceGroup,
    Explanation,
    GroupBreakdown,
    SemanticAnalysis,
    Verdict,
    VerdictClassification,
)

SUMMARIES: Dict[VerdictClassification, str] = {
    VerdictClassification.VERIFIED_TRUE: (
        "This claim is strongly supported by high-quality evidence from authoritative "
        "sources with high confidence."),
    VerdictClassification.LIKELY_TRUE: (
        "This claim appears to be accurate based on available evidence, though some "
        "uncertainty remains."),
    VerdictClassification.LIKELY_FALSE: (
        "This claim contradicts reliable evidence and appears to be false or misleading."),
    VerdictClassification.VERIFIED_FALSE: (
        "This claim is definitively contradicted by authoritative evidence and is false."),
    VerdictClassification.INSUFFICIENT_EVIDENCE: (
        "There is not enough reliable evidence to determine the accuracy of this claim."),
}

BASE_LIMITATIONS = [
    "Analysis based on the sources available in the evidence knowledge base",
    "Lexical scoring may not capture all nuances of meaning",
]
HIGH_UNCERTAINTY_LIMITATION = "High uncertainty detected - human expert review recommended"
CONFLICTING_EVIDENCE_LIMITATION = "Conflicting evidence found across sources"

REVIEW_STEPS = ["Submit for human expert review", "Seek additional authoritative sources"]
INSUFFICIENT_EVIDENCE_STEPS = ["Search for more recent evidence", "Consult domain-specific experts"]
MONITORING_STEPS = ["Monitor for new contradicting evidence", "Periodic re-evaluation recommended"]

TOP_SOURCES_PER_GROUP = 2


class ExplanationGenerator:
    """Builds summaries, evidence breakdowns, reasoning and recommendations."""

    def __init__(self, config: Optional[FactCheckConfig] = None):
        self.config = config or FactCheckConfig()

    def generate(self, verdict: Verdict, evidence: List[EvidenceGroup],
                 semantic: SemanticAnalysis) -> Explanation:
        return Explanation(
            summary=self.generate_summary(verdict),
            evidence_breakdown=self.generate_evidence_breakdown(evidence),
            reasoning_steps=self.generate_reasoning_steps(semantic, verdict),
            limitations=self.generate_limitations(verdict),
            next_steps=self.generate_next_steps(verdict),
        )

    def generate_summary(self, verdict: Verdict) -> str:
        return SUMMARIES.get(verdict.classification, "Unable to classify this claim.")

    def generate_evidence_breakdown(self, evidence: List[EvidenceGroup]) -> List[GroupBreakdown]:
        breakdown = []
        for group in evidence:
            sources = list(group.sources)
            average = sum(s.credibility for s in sources) / len(sources) if sources else 0.0
            breakdown.append(GroupBreakdown(
                claim_text=group.claim_id,
                supporting_sources=sum(1 for s in sources if s.supports),
                contradicting_sources=sum(1 for s in sources if not s.supports),
                average_credibility=average,
                top_sources=sorted(sources, key=lambda s: s.credibility, reverse=True)[:TOP_SOURCES_PER_GROUP],
            ))
        return breakdown

    def generate_reasoning_steps(self, semantic: SemanticAnalysis, verdict: Verdict) -> List[str]:
        steps = [
            f"Semantic similarity analysis: {semantic.semantic_similarity * 100:.1f}%",
            f"Logical consistency check: {semantic.logical_consistency * 100:.1f}%",
        ]

        if semantic.requires_multi_hop:
            steps.append("Multi-hop reasoning required - analyzed complex logical chains")

        steps.append(f"Final confidence score: {verdict.score * 100:.1f}%")
        steps.append(f"Uncertainty measure: {verdict.uncertainty_score * 100:.1f}%")
        return steps

    def generate_limitations(self, verdict: Verdict) -> List[str]:
        limitations = list(BASE_LIMITATIONS)

        if verdict.uncertainty_score > self.config.thresholds.human_review_uncertainty:
            limitations.append(HIGH_UNCERTAINTY_LIMITATION)

        if verdict.conflicting_evidence:
            limitations.append(CONFLICTING_EVIDENCE_LIMITATION)

        return limitations

    def generate_next_steps(self, verdict: Verdict) -> List[str]:
        if verdict.requires_human_review:
            return list(REVIEW_STEPS)
        if verdict.classification == VerdictClassification.INSUFFICIENT_EVIDENCE:
            return list(INSUFFICIENT_EVIDENCE_STEPS)
        return list(MONITORING_STEPS)
