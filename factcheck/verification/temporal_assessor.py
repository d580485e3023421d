"""
Temporal awareness for the analysis report.
Extracts time references from the input text and estimates its recency.
"""

from typing import List, Optional

from ..config import FactCheckConfig
from ..constants import ScoreDefaults
from ..core.keywords import TIME_REFERENCE_PATTERN
from ..core.models import TemporalAwareness
from ..core.sampling import DeterministicSampler, ScoreSampler


class TemporalAssessor:
    """
    Finds years, d/m/yyyy dates and relative day words in the text.

    The recency score is a sampled placeholder when time references exist
    and a fixed low value when they do not.
    """

    def __init__(self, config: Optional[FactCheckConfig] = None,
                 sampler: Optional[ScoreSampler] = None):
        self.config = config or FactCheckConfig()
        self.sampler = sampler or DeterministicSampler(self.config.sampler_seed)

    def assess(self, text: str) -> TemporalAwareness:
        references = self.extract_time_references(text)
        if references:
            low, high = ScoreDefaults.RECENCY_RANGE
            recency = self.sampler.uniform(low, high, f"temporal.recency:{text}")
        else:
            recency = ScoreDefaults.NO_TIME_REFERENCE_RECENCY

        return TemporalAwareness(
            has_time_references=bool(references),
            time_references=references,
            recency_score=recency,
        )

    def extract_time_references(self, text: str) -> List[str]:
        return TIME_REFERENCE_PATTERN.findall(text or "")
