"""
Constants and enums for the fact-check pipeline.

Collects stage names, progress milestones and default tuning values so the
rest of the package does not carry magic strings or numbers.
"""

from typing import Final, List, Tuple


class StageNames:
    """Names of the six pipeline stages, in execution order."""
    CLAIM_DETECTION: Final[str] = "Claim Detection"
    EVIDENCE_RETRIEVAL: Final[str] = "Evidence Retrieval"
    SEMANTIC_ANALYSIS: Final[str] = "Semantic Analysis"
    CREDIBILITY_ASSESSMENT: Final[str] = "Credibility Assessment"
    VERDICT_CLASSIFICATION: Final[str] = "Verdict Classification"
    EXPLANATION_GENERATION: Final[str] = "Explanation Generation"


# (stage name, percent complete once the stage has finished)
STAGE_MILESTONES: Final[List[Tuple[str, int]]] = [
    (StageNames.CLAIM_DETECTION, 16),
    (StageNames.EVIDENCE_RETRIEVAL, 33),
    (StageNames.SEMANTIC_ANALYSIS, 50),
    (StageNames.CREDIBILITY_ASSESSMENT, 66),
    (StageNames.VERDICT_CLASSIFICATION, 83),
    (StageNames.EXPLANATION_GENERATION, 100),
]


class ConfigDefaults:
    """Default configuration values."""
    MAX_CLAIMS: Final[int] = 3
    MIN_SENTENCE_LENGTH: Final[int] = 20
    CLAIM_ID_LENGTH: Final[int] = 50
    REFERENCE_YEAR: Final[int] = 2025
    MAX_WORKERS: Final[int] = 1
    SAMPLER_SEED: Final[int] = 0
    LOG_LEVEL: Final[str] = "INFO"


class ScoreDefaults:
    """Constants of the lexical scoring heuristics."""
    BASE_PRIORITY: Final[float] = 0.5
    CONFIDENCE_RANGE: Final[Tuple[float, float]] = (0.7, 1.0)
    ASSERTIVE_VERB_BONUS: Final[float] = 0.2
    CONTRADICTION_HIGH_RANGE: Final[Tuple[float, float]] = (0.3, 0.7)
    CONTRADICTION_LOW_RANGE: Final[Tuple[float, float]] = (0.0, 0.2)
    MISSING_YEAR_TEMPORAL_SCORE: Final[float] = 0.5
    TEMPORAL_DECAY_PER_YEAR: Final[float] = 0.1
    MIN_TEMPORAL_SCORE: Final[float] = 0.1
    SINGLE_SENTENCE_CONSISTENCY: Final[float] = 0.8
    BASE_CONSISTENCY: Final[float] = 0.7
    NEGATION_FLIP_PENALTY: Final[float] = 0.2
    NEGATION_FLIP_OVERLAP: Final[float] = 0.5
    MIN_CONSISTENCY: Final[float] = 0.1
    MULTI_HOP_MIN_SENTENCES: Final[int] = 3
    NO_EVIDENCE_VARIANCE: Final[float] = 1.0
    POLITICAL_BIAS_RANGE: Final[Tuple[float, float]] = (0.0, 0.3)
    CULTURAL_BIAS_RANGE: Final[Tuple[float, float]] = (0.0, 0.2)
    PERSPECTIVE_BALANCE_RANGE: Final[Tuple[float, float]] = (0.6, 1.0)
    RECENCY_RANGE: Final[Tuple[float, float]] = (0.6, 1.0)
    NO_TIME_REFERENCE_RECENCY: Final[float] = 0.3
    DIVERSITY_FULL_GROUPS: Final[int] = 3


class LogMessages:
    """Common log message templates."""
    STAGE_DONE = "Stage '{stage}' finished in {elapsed:.4f}s"
    ANALYSIS_DONE = ("Analysis complete: {classification} (score={score:.3f}, "
                     "uncertainty={uncertainty:.3f}, evidence={evidence_count}, review={review})")
    NO_CLAIMS = "No checkworthy claims detected in {length} characters of text"
    NO_TOPIC = "No knowledge-base topic matched claim '{claim_id}'"
