"""
Bias metrics for the analysis report.

Political and cultural bias and perspective balance are sampled
placeholders until a bias classifier is integrated; source diversity is
derived from the evidence actually retrieved.
"""

from typing import List, Optional

from ..config import FactCheckConfig
from ..constants import ScoreDefaults
from ..core.models import BiasMetrics, EvidenceGroup
from ..core.sampling import DeterministicSampler, ScoreSampler


class BiasAssessor:
    """Computes bias proxies and source diversity."""

    def __init__(self, config: Optional[FactCheckConfig] = None,
                 sampler: Optional[ScoreSampler] = None):
        self.config = config or FactCheckConfig()
        self.sampler = sampler or DeterministicSampler(self.config.sampler_seed)

    def assess(self, text: str, evidence: List[EvidenceGroup]) -> BiasMetrics:
        political_low, political_high = ScoreDefaults.POLITICAL_BIAS_RANGE
        cultural_low, cultural_high = ScoreDefaults.CULTURAL_BIAS_RANGE
        balance_low, balance_high = ScoreDefaults.PERSPECTIVE_BALANCE_RANGE

        return BiasMetrics(
            political_bias=self.sampler.uniform(political_low, political_high, f"bias.political:{text}"),
            cultural_bias=self.sampler.uniform(cultural_low, cultural_high, f"bias.cultural:{text}"),
            source_diversity=self.calculate_source_diversity(evidence),
            perspective_balance=self.sampler.uniform(balance_low, balance_high, f"bias.balance:{text}"),
        )

    def calculate_source_diversity(self, evidence: List[EvidenceGroup]) -> float:
        return min(len(evidence) / ScoreDefaults.DIVERSITY_FULL_GROUPS, 1.0)
