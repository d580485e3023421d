"""
Configuration management for the fact-check pipeline.
"""

from dataclasses import dataclass, field
from typing import Optional

from utils.config import Config
from .constants import ConfigDefaults


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the verdict score fusion. Hand-tuned; they must sum to 1."""
    semantic: float = 0.4
    credibility: float = 0.3
    consistency: float = 0.3

    def __post_init__(self):
        for name in ('semantic', 'credibility', 'consistency'):
            if getattr(self, name) < 0:
                raise ValueError(f"weight '{name}' must be non-negative")
        if abs(self.semantic + self.credibility + self.consistency - 1.0) > 1e-9:
            raise ValueError("scoring weights must sum to 1.0")

    def to_dict(self) -> dict:
        return {
            'semantic': self.semantic,
            'credibility': self.credibility,
            'consistency': self.consistency,
        }


@dataclass(frozen=True)
class VerdictThresholds:
    """
    Thresholds of the verdict decision table and the human review gate.

    Each row pairs a score bound with a strict upper bound on uncertainty and
    the half-width of the confidence interval reported for that bucket.
    """
    verified_true_score: float = 0.8
    verified_true_uncertainty: float = 0.3
    verified_true_margin: float = 0.05
    likely_true_score: float = 0.6
    likely_true_uncertainty: float = 0.4
    likely_true_margin: float = 0.1
    likely_false_score: float = 0.4
    likely_false_uncertainty: float = 0.4
    likely_false_margin: float = 0.1
    verified_false_score: float = 0.2
    verified_false_uncertainty: float = 0.3
    verified_false_margin: float = 0.05
    insufficient_margin: float = 0.2
    human_review_uncertainty: float = 0.3

    def __post_init__(self):
        for name, value in self.to_dict().items():
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"threshold '{name}' must be within [0, 1]")

    def to_dict(self) -> dict:
        return {
            'verified_true_score': self.verified_true_score,
            'verified_true_uncertainty': self.verified_true_uncertainty,
            'verified_true_margin': self.verified_true_margin,
            'likely_true_score': self.likely_true_score,
            'likely_true_uncertainty': self.likely_true_uncertainty,
            'likely_true_margin': self.likely_true_margin,
            'likely_false_score': self.likely_false_score,
            'likely_false_uncertainty': self.likely_false_uncertainty,
            'likely_false_margin': self.likely_false_margin,
            'verified_false_score': self.verified_false_score,
            'verified_false_uncertainty': self.verified_false_uncertainty,
            'verified_false_margin': self.verified_false_margin,
            'insufficient_margin': self.insufficient_margin,
            'human_review_uncertainty': self.human_review_uncertainty,
        }


@dataclass
class FactCheckConfig:
    """
    Configuration for the fact-check pipeline and its components.

    Centralizes every tuned constant so tests and deployments can override
    them without touching the scoring code.
    """

    max_claims: int = ConfigDefaults.MAX_CLAIMS
    min_sentence_length: int = ConfigDefaults.MIN_SENTENCE_LENGTH
    claim_id_length: int = ConfigDefaults.CLAIM_ID_LENGTH
    reference_year: int = ConfigDefaults.REFERENCE_YEAR
    max_workers: int = ConfigDefaults.MAX_WORKERS
    sampler_seed: int = ConfigDefaults.SAMPLER_SEED
    log_level: str = ConfigDefaults.LOG_LEVEL
    knowledge_base_path: Optional[str] = None
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    thresholds: VerdictThresholds = field(default_factory=VerdictThresholds)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config()

    def _validate_config(self):
        if self.max_claims <= 0:
            raise ValueError("max_claims must be positive")

        if self.min_sentence_length < 0:
            raise ValueError("min_sentence_length must be non-negative")

        if self.claim_id_length <= 0:
            raise ValueError("claim_id_length must be positive")

        if self.reference_year < 2000:
            raise ValueError("reference_year must be 2000 or later")

        if self.max_workers <= 0:
            raise ValueError("max_workers must be positive")

        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"invalid log_level '{self.log_level}'")

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'FactCheckConfig':
        """Create configuration from dictionary."""
        values = dict(config_dict)
        if isinstance(values.get('weights'), dict):
            values['weights'] = ScoringWeights(**values['weights'])
        if isinstance(values.get('thresholds'), dict):
            values['thresholds'] = VerdictThresholds(**values['thresholds'])
        return cls(**values)

    @classmethod
    def from_env(cls) -> 'FactCheckConfig':
        """Create configuration from FACTCHECK_* environment variables."""
        return cls(
            max_claims=Config.get_int('FACTCHECK_MAX_CLAIMS', ConfigDefaults.MAX_CLAIMS),
            reference_year=Config.get_int('FACTCHECK_REFERENCE_YEAR', ConfigDefaults.REFERENCE_YEAR),
            max_workers=Config.get_int('FACTCHECK_MAX_WORKERS', ConfigDefaults.MAX_WORKERS),
            sampler_seed=Config.get_int('FACTCHECK_SAMPLER_SEED', ConfigDefaults.SAMPLER_SEED),
            log_level=Config.get_env_var('FACTCHECK_LOG_LEVEL', ConfigDefaults.LOG_LEVEL),
            knowledge_base_path=Config.get_env_var('FACTCHECK_KNOWLEDGE_BASE') or None,
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            'max_claims': self.max_claims,
            'min_sentence_length': self.min_sentence_length,
            'claim_id_length': self.claim_id_length,
            'reference_year': self.reference_year,
            'max_workers': self.max_workers,
            'sampler_seed': self.sampler_seed,
            'log_level': self.log_level,
            'knowledge_base_path': self.knowledge_base_path,
            'weights': self.weights.to_dict(),
            'thresholds': self.thresholds.to_dict(),
        }

    def __str__(self) -> str:
        return f"FactCheckConfig({self.to_dict()})"
