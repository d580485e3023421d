"""
Claim detection for the fact-check pipeline.
Identifies the sentences of a text that warrant evidence checking.
"""

import logging
from typing import List, Optional

from utils.text_utils import split_sentences
from ..config import FactCheckConfig
from ..constants import LogMessages, ScoreDefaults
from .keywords import CATEGORY_TABLE, FACTUAL_REGISTER, PRIORITY_TABLE, REPORTING_REGISTER
from .models import Claim, ClaimCategory
from .sampling import DeterministicSampler, ScoreSampler

logger = logging.getLogger(__name__)


class ClaimDetector:
    """
    Selects checkworthy sentences and turns them into prioritized claims.

    A sentence is checkworthy when it is longer than the configured minimum
    and uses either factual-register or reporting-register vocabulary.
    """

    def __init__(self, config: Optional[FactCheckConfig] = None,
                 sampler: Optional[ScoreSampler] = None):
        self.config = config or FactCheckConfig()
        self.sampler = sampler or DeterministicSampler(self.config.sampler_seed)

    def detect_claims(self, text: str) -> List[Claim]:
        """
        Extract up to ``max_claims`` claims, highest priority first.

        Args:
            text: Raw input text

        Returns:
            Claims sorted by descending priority; empty when nothing is checkworthy
        """
        # Fragments keep their surrounding whitespace for the length check
        claims = [self._build_claim(fragment.strip())
                  for fragment in split_sentences(text, strip=False)
                  if self.is_checkworthy(fragment)]

        if not claims:
            logger.debug(LogMessages.NO_CLAIMS.format(length=len(text or "")))
            return []

        # sorted() is stable, so equal priorities keep their order in the text
        claims = sorted(claims, key=lambda claim: claim.priority, reverse=True)
        return claims[:self.config.max_claims]

    def is_checkworthy(self, sentence: str) -> bool:
        """Length is measured on the sentence exactly as it was split from the text."""
        if len(sentence) <= self.config.min_sentence_length:
            return False
        return FACTUAL_REGISTER.matches(sentence) or REPORTING_REGISTER.matches(sentence)

    def categorize(self, sentence: str) -> ClaimCategory:
        return CATEGORY_TABLE.classify(sentence)

    def calculate_priority(self, sentence: str) -> float:
        priority = ScoreDefaults.BASE_PRIORITY + sum(PRIORITY_TABLE.matching_tags(sentence))
        return min(priority, 1.0)

    def _build_claim(self, sentence: str) -> Claim:
        low, high = ScoreDefaults.CONFIDENCE_RANGE
        return Claim(
            text=sentence,
            confidence=self.sampler.uniform(low, high, f"claim.confidence:{sentence}"),
            category=self.categorize(sentence),
            priority=self.calculate_priority(sentence),
        )
