"""
Fact-check analysis pipeline.
Detects checkworthy claims, scores them against a knowledge base of evidence
and produces a verdict with an explicit uncertainty band and explanation.
"""

from .api import FactCheckAPI, analyze, create_factcheck_api
from .config import FactCheckConfig, ScoringWeights, VerdictThresholds
from .core.knowledge_base import KnowledgeBase
from .core.models import AnalysisReport, VerdictClassification
from .core.sampling import DeterministicSampler, RandomSampler, ScoreSampler
from .errors import AnalysisCancelledError, FactCheckError, InvalidInputError, KnowledgeBaseError
from .pipeline import FactCheckPipeline

__version__ = "1.0.0"
__all__ = [
    # Main API
    "FactCheckAPI",
    "FactCheckPipeline",
    "analyze",
    "create_factcheck_api",

    # Configuration
    "FactCheckConfig",
    "ScoringWeights",
    "VerdictThresholds",
    "KnowledgeBase",
    "ScoreSampler",
    "DeterministicSampler",
    "RandomSampler",

    # Results
    "AnalysisReport",
    "VerdictClassification",

    # Errors
    "FactCheckError",
    "InvalidInputError",
    "AnalysisCancelledError",
    "KnowledgeBaseError",
]
