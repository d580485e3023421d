"""
Fact-check pipeline - orchestrates the six analysis stages.

Stage 1: Claim Detection
Stage 2: Evidence Retrieval
Stage 3: Semantic Analysis
Stage 4: Credibility Assessment
Stage 5: Verdict Classification
Stage 6: Explanation Generation (plus the bias and temporal assessors)
"""

import logging
import threading
import time
from typing import Callable, List, Optional

from .config import FactCheckConfig
from .constants import LogMessages, STAGE_MILESTONES, StageNames
from .core.claim_detector import ClaimDetector
from .core.evidence_retriever import EvidenceRetriever
from .core.knowledge_base import KnowledgeBase
from .core.models import AnalysisReport
from .core.sampling import ScoreSampler, create_sampler
from .errors import AnalysisCancelledError, InvalidInputError
from .integration.explanation_generator import ExplanationGenerator
from .verification.bias_assessor import BiasAssessor
from .verification.credibility_scorer import CredibilityScorer
from .verification.semantic_analyzer import SemanticAnalyzer
from .verification.temporal_assessor import TemporalAssessor
from .verification.verdict_classifier import VerdictClassifier

logger = logging.getLogger(__name__)

StageCallback = Callable[[str, int], None]

_MILESTONES = dict(STAGE_MILESTONES)


class FactCheckPipeline:
    """
    Runs the analysis stages in order for one text at a time.

    The pipeline holds no per-request state: every call to ``analyze``
    builds a fresh report, and the knowledge base is only read.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None,
                 config: Optional[FactCheckConfig] = None,
                 sampler: Optional[ScoreSampler] = None):
        self.config = config or FactCheckConfig()
        if knowledge_base is None:
            if self.config.knowledge_base_path:
                knowledge_base = KnowledgeBase.from_json_file(self.config.knowledge_base_path)
            else:
                knowledge_base = KnowledgeBase.default()
        self.knowledge_base = knowledge_base
        self.sampler = sampler or create_sampler(self.config.sampler_seed)

        self.claim_detector = ClaimDetector(self.config, self.sampler)
        self.evidence_retriever = EvidenceRetriever(self.knowledge_base, self.config)
        self.semantic_analyzer = SemanticAnalyzer(self.config, self.sampler)
        self.credibility_scorer = CredibilityScorer()
        self.verdict_classifier = VerdictClassifier(self.config)
        self.explanation_generator = ExplanationGenerator(self.config)
        self.bias_assessor = BiasAssessor(self.config, self.sampler)
        self.temporal_assessor = TemporalAssessor(self.config, self.sampler)

    def analyze(self, text: str, on_stage: Optional[StageCallback] = None,
                cancel_event: Optional[threading.Event] = None) -> AnalysisReport:
        """
        Run the full analysis on ``text``.

        Args:
            text: Free-form text to fact-check
            on_stage: Called as ``on_stage(stage_name, percent)`` after each stage
            cancel_event: Checked before each stage; when set the run stops

        Returns:
            AnalysisReport for the text

        Raises:
            InvalidInputError: ``text`` is not a string or is blank
            AnalysisCancelledError: ``cancel_event`` was set before a stage
        """
        validate_text(text)
        completed: List[str] = []

        def run_stage(stage: str, func, *args):
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Analysis cancelled before '{stage}' after {len(completed)} stages")
                raise AnalysisCancelledError(stage)

            started = time.perf_counter()
            result = func(*args)
            logger.debug(LogMessages.STAGE_DONE.format(stage=stage, elapsed=time.perf_counter() - started))

            completed.append(stage)
            if on_stage is not None:
                on_stage(stage, _MILESTONES[stage])
            return result

        claims = run_stage(StageNames.CLAIM_DETECTION, self.claim_detector.detect_claims, text)
        evidence = run_stage(StageNames.EVIDENCE_RETRIEVAL, self.evidence_retriever.retrieve, claims)
        semantic = run_stage(StageNames.SEMANTIC_ANALYSIS, self.semantic_analyzer.analyze, text, evidence)
        credibility = run_stage(StageNames.CREDIBILITY_ASSESSMENT, self.credibility_scorer.assess, evidence)
        verdict = run_stage(StageNames.VERDICT_CLASSIFICATION, self.verdict_classifier.classify_evidence,
                            evidence, semantic, credibility)

        def explain():
            return (self.explanation_generator.generate(verdict, evidence, semantic),
                    self.bias_assessor.assess(text, evidence),
                    self.temporal_assessor.assess(text))

        explanation, bias_metrics, temporal = run_stage(StageNames.EXPLANATION_GENERATION, explain)

        logger.info(LogMessages.ANALYSIS_DONE.format(
            classification=verdict.classification.value,
            score=verdict.score,
            uncertainty=verdict.uncertainty_score,
            evidence_count=verdict.evidence_count,
            review=verdict.requires_human_review,
        ))

        return AnalysisReport(
            claims=claims,
            evidence=evidence,
            semantic_analysis=semantic,
            credibility=credibility,
            verdict=verdict,
            explanation=explanation,
            bias_metrics=bias_metrics,
            temporal_awareness=temporal,
            processing_stages=completed,
        )


def validate_text(text) -> None:
    """Reject anything that is not a string with visible content."""
    if not isinstance(text, str):
        raise InvalidInputError(f"Text to analyze must be a string, got {type(text).__name__}")
    if not text.strip():
        raise InvalidInputError("Text to analyze is empty or whitespace-only")
