"""
Data structures and models for fact-check analysis results.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from enum import Enum


class ClaimCategory(Enum):
    """Subject area a claim belongs to."""
    CLIMATE = "climate"
    HEALTH = "health"
    POLITICS = "politics"
    ECONOMICS = "economics"
    GENERAL = "general"


class SourceType(Enum):
    """Authority tier of an evidence source."""
    AUTHORITATIVE = "authoritative"
    ACADEMIC = "academic"
    GOVERNMENTAL = "governmental"
    OTHER = "other"


class VerdictClassification(Enum):
    """Possible verdicts for an analyzed text."""
    VERIFIED_TRUE = "verified_true"
    LIKELY_TRUE = "likely_true"
    LIKELY_FALSE = "likely_false"
    VERIFIED_FALSE = "verified_false"
    INSUFFICIENT_EVIDENCE = "insufficient_evidence"


@dataclass(frozen=True)
class Claim:
    """A checkworthy sentence selected for evidence checking."""
    text: str
    confidence: float  # 0.7 to 1.0, placeholder for a claim-scoring model
    category: ClaimCategory
    priority: float  # 0.0 to 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'confidence': self.confidence,
            'category': self.category.value,
            'priority': self.priority,
        }


@dataclass(frozen=True)
class KnowledgeSource:
    """A source record as stored in the knowledge base."""
    title: str
    credibility: float  # 0.0 to 1.0
    supports: bool
    excerpt: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'credibility': self.credibility,
            'supports': self.supports,
            'excerpt': self.excerpt,
        }


@dataclass(frozen=True)
class EvidenceSource:
    """A knowledge-base source scored against a specific claim."""
    title: str
    credibility: float
    supports: bool
    excerpt: str
    relevance_score: float  # 0.0 to 1.0
    temporal_score: float  # 0.1 to 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'credibility': self.credibility,
            'supports': self.supports,
            'excerpt': self.excerpt,
            'relevance_score': self.relevance_score,
            'temporal_score': self.temporal_score,
        }


@dataclass(frozen=True)
class EvidenceGroup:
    """The sources retrieved for one claim."""
    claim_id: str  # truncated claim text plus ellipsis
    claim_text: str
    topic: str
    sources: Tuple[EvidenceSource, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'claim_id': self.claim_id,
            'claim_text': self.claim_text,
            'topic': self.topic,
            'sources': [source.to_dict() for source in self.sources],
        }


@dataclass
class SemanticAnalysis:
    """Entailment scoring for all (claim, source) pairs plus text-level checks."""
    entailment_scores: List[float] = field(default_factory=list)
    contradiction_scores: List[float] = field(default_factory=list)
    neutral_scores: List[float] = field(default_factory=list)  # not clamped, may be negative
    requires_multi_hop: bool = False
    semantic_similarity: float = 0.0
    logical_consistency: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'entailment_scores': list(self.entailment_scores),
            'contradiction_scores': list(self.contradiction_scores),
            'neutral_scores': list(self.neutral_scores),
            'requires_multi_hop': self.requires_multi_hop,
            'semantic_similarity': self.semantic_similarity,
            'logical_consistency': self.logical_consistency,
        }


@dataclass
class CredibilityAssessment:
    """Source credibility summary, aligned with the flattened source list."""
    average_credibility: float = 0.0
    source_types: List[SourceType] = field(default_factory=list)
    authority_scores: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'average_credibility': self.average_credibility,
            'source_types': [source_type.value for source_type in self.source_types],
            'authority_scores': list(self.authority_scores),
        }


@dataclass
class Verdict:
    """Final classification with its uncertainty band."""
    classification: VerdictClassification
    score: float
    uncertainty_score: float
    confidence_interval: Tuple[float, float]
    conflicting_evidence: bool
    evidence_count: int
    requires_human_review: bool
    evidence_variance: float = 0.0
    semantic_uncertainty: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'classification': self.classification.value,
            'score': self.score,
            'uncertainty_score': self.uncertainty_score,
            'confidence_interval': list(self.confidence_interval),
            'conflicting_evidence': self.conflicting_evidence,
            'evidence_count': self.evidence_count,
            'requires_human_review': self.requires_human_review,
            'evidence_variance': self.evidence_variance,
            'semantic_uncertainty': self.semantic_uncertainty,
        }


@dataclass
class GroupBreakdown:
    """Per-claim evidence statistics used in explanations."""
    claim_text: str
    supporting_sources: int
    contradicting_sources: int
    average_credibility: float
    top_sources: List[EvidenceSource] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'claim_text': self.claim_text,
            'supporting_sources': self.supporting_sources,
            'contradicting_sources': self.contradicting_sources,
            'average_credibility': self.average_credibility,
            'top_sources': [source.to_dict() for source in self.top_sources],
        }


@dataclass
class Explanation:
    """Human-readable account of a verdict."""
    summary: str
    evidence_breakdown: List[GroupBreakdown] = field(default_factory=list)
    reasoning_steps: List[str] = field(default_factory=list)
    limitations: List[str] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'summary': self.summary,
            'evidence_breakdown': [breakdown.to_dict() for breakdown in self.evidence_breakdown],
            'reasoning_steps': list(self.reasoning_steps),
            'limitations': list(self.limitations),
            'next_steps': list(self.next_steps),
        }


@dataclass
class BiasMetrics:
    """Bias proxies and source diversity."""
    political_bias: float
    cultural_bias: float
    source_diversity: float
    perspective_balance: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'political_bias': self.political_bias,
            'cultural_bias': self.cultural_bias,
            'source_diversity': self.source_diversity,
            'perspective_balance': self.perspective_balance,
        }


@dataclass
class TemporalAwareness:
    """Time references found in the text and a recency estimate."""
    has_time_references: bool
    time_references: List[str] = field(default_factory=list)
    recency_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'has_time_references': self.has_time_references,
            'time_references': list(self.time_references),
            'recency_score': self.recency_score,
        }


@dataclass
class AnalysisReport:
    """Complete result of one pipeline run."""
    claims: List[Claim]
    evidence: List[EvidenceGroup]
    semantic_analysis: SemanticAnalysis
    credibility: CredibilityAssessment
    verdict: Verdict
    explanation: Explanation
    bias_metrics: BiasMetrics
    temporal_awareness: TemporalAwareness
    processing_stages: List[str] = field(default_factory=list)

    @property
    def multi_hop_reasoning(self) -> bool:
        return self.semantic_analysis.requires_multi_hop

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'claims': [claim.to_dict() for claim in self.claims],
            'evidence': [group.to_dict() for group in self.evidence],
            'semantic_analysis': self.semantic_analysis.to_dict(),
            'credibility': self.credibility.to_dict(),
            'verdict': self.verdict.to_dict(),
            'explanation': self.explanation.to_dict(),
            'bias_metrics': self.bias_metrics.to_dict(),
            'temporal_awareness': self.temporal_awareness.to_dict(),
            'processing_stages': list(self.processing_stages),
            'multi_hop_reasoning': self.multi_hop_reasoning,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
