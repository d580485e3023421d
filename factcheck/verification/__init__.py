"""
Verification components for evidence scoring and verdicts.
"""

from .semantic_analyzer import SemanticAnalyzer
from .credibility_scorer import CredibilityScorer
from .verdict_classifier import VerdictClassifier
from .bias_assessor import BiasAssessor
from .temporal_assessor import TemporalAssessor

__all__ = [
    "SemanticAnalyzer",
    "CredibilityScorer",
    "VerdictClassifier",
    "BiasAssessor",
    "TemporalAssessor",
]
