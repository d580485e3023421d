"""
Evidence retrieval from the knowledge base.
Links each claim to at most one topic and scores the topic's sources.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from utils.text_utils import overlap_ratio, tokenize
from ..config import FactCheckConfig
from ..constants import LogMessages, ScoreDefaults
from .keywords import TITLE_YEAR_PATTERN
from .knowledge_base import KnowledgeBase
from .models import Claim, EvidenceGroup, EvidenceSource, KnowledgeSource

logger = logging.getLogger(__name__)


class EvidenceRetriever:
    """
    Retrieves knowledge-base evidence for claims.

    Relevance and temporal scores are pure functions of the claim text and
    the source, so retrieval is deterministic and safe to run per claim on
    a thread pool.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None,
                 config: Optional[FactCheckConfig] = None):
        if knowledge_base is None:
            knowledge_base = KnowledgeBase.default()
        self.knowledge_base = knowledge_base
        self.config = config or FactCheckConfig()

    def retrieve(self, claims: List[Claim]) -> List[EvidenceGroup]:
        """
        Retrieve evidence for every claim.

        Args:
            claims: Claims from the detector, in priority order

        Returns:
            One group per claim that matched a topic, in claim order
        """
        if self.config.max_workers > 1 and len(claims) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                groups = list(executor.map(self.retrieve_for_claim, claims))
        else:
            groups = [self.retrieve_for_claim(claim) for claim in claims]

        return [group for group in groups if group is not None]

    def retrieve_for_claim(self, claim: Claim) -> Optional[EvidenceGroup]:
        topic = self.match_topic(claim)
        if topic is None:
            logger.debug(LogMessages.NO_TOPIC.format(claim_id=self._claim_id(claim.text)))
            return None

        sources = tuple(self._score_source(claim.text, source)
                        for source in self.knowledge_base.sources_for(topic))
        return EvidenceGroup(
            claim_id=self._claim_id(claim.text),
            claim_text=claim.text,
            topic=topic,
            sources=sources,
        )

    def match_topic(self, claim: Claim) -> Optional[str]:
        """First topic contained in the claim text or mapped from its category."""
        lowered = claim.text.lower()
        category_topic = self.knowledge_base.topic_for_category(claim.category)
        for topic in self.knowledge_base.topics:
            if topic in lowered or topic == category_topic:
                return topic
        return None

    def calculate_relevance(self, claim_text: str, excerpt: str) -> float:
        """Share of claim tokens that also appear in the excerpt."""
        claim_tokens = tokenize(claim_text)
        return min(overlap_ratio(claim_tokens, tokenize(excerpt), len(claim_tokens)), 1.0)

    def calculate_temporal_relevance(self, title: str) -> float:
        """Linear recency decay from the year in the title."""
        match = TITLE_YEAR_PATTERN.search(title)
        if not match:
            return ScoreDefaults.MISSING_YEAR_TEMPORAL_SCORE

        years_old = self.config.reference_year - int(match.group(1))
        score = 1.0 - ScoreDefaults.TEMPORAL_DECAY_PER_YEAR * years_old
        return min(1.0, max(ScoreDefaults.MIN_TEMPORAL_SCORE, score))

    def _score_source(self, claim_text: str, source: KnowledgeSource) -> EvidenceSource:
        return EvidenceSource(
            title=source.title,
            credibility=source.credibility,
            supports=source.supports,
            excerpt=source.excerpt,
            relevance_score=self.calculate_relevance(claim_text, source.excerpt),
            temporal_score=self.calculate_temporal_relevance(source.title),
        )

    def _claim_id(self, claim_text: str) -> str:
        return claim_text[:self.config.claim_id_length] + '...'
