"""
Core components of the fact-check pipeline.
"""

from .models import (
    AnalysisReport,
    BiasMetrics,
    Claim,
    ClaimCategory,
    CredibilityAssessment,
    EvidenceGroup,
    EvidenceSource,
    Explanation,
    GroupBreakdown,
    KnowledgeSource,
    SemanticAnalysis,
    SourceType,
    TemporalAwareness,
    Verdict,
    VerdictClassification,
)
from .knowledge_base import KnowledgeBase
from .sampling import DeterministicSampler, RandomSampler, ScoreSampler, create_sampler
from .claim_detector import ClaimDetector
from .evidence_retriever import EvidenceRetriever

__all__ = [
    "AnalysisReport",
    "BiasMetrics",
    "Claim",
    "ClaimCategory",
    "ClaimDetector",
    "CredibilityAssessment",
    "DeterministicSampler",
    "EvidenceGroup",
    "EvidenceRetriever",
    "EvidenceSource",
    "Explanation",
    "GroupBreakdown",
    "KnowledgeBase",
    "KnowledgeSource",
    "RandomSampler",
    "ScoreSampler",
    "SemanticAnalysis",
    "SourceType",
    "TemporalAwareness",
    "Verdict",
    "VerdictClassification",
    "create_sampler",
]
