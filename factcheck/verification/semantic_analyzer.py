"""
Semantic analysis of claims against retrieved evidence.

Lexical-overlap stand-ins for natural language inference: each (claim,
excerpt) pair gets entailment, contradiction and neutral scores, and the
input text as a whole is checked for multi-hop structure and internal
consistency.
"""

import logging
from typing import List, Optional

from utils.text_utils import split_sentences, symmetric_overlap, tokenize
from ..config import FactCheckConfig
from ..constants import ScoreDefaults
from ..core.keywords import ASSERTIVE_VERBS, CAUSAL_CONNECTIVES, DENIAL_CUES, SENTENCE_NEGATIONS
from ..core.models import EvidenceGroup, SemanticAnalysis
from ..core.sampling import DeterministicSampler, ScoreSampler

logger = logging.getLogger(__name__)


class SemanticAnalyzer:
    """Scores entailment between claims and evidence excerpts."""

    def __init__(self, config: Optional[FactCheckConfig] = None,
                 sampler: Optional[ScoreSampler] = None):
        self.config = config or FactCheckConfig()
        self.sampler = sampler or DeterministicSampler(self.config.sampler_seed)

    def analyze(self, text: str, evidence: List[EvidenceGroup]) -> SemanticAnalysis:
        """
        Score every (claim, source) pair and the text's own structure.

        Args:
            text: The full input text
            evidence: Evidence groups from the retriever

        Returns:
            SemanticAnalysis with one score triple per source
        """
        analysis = SemanticAnalysis()

        for group in evidence:
            for source in group.sources:
                entailment = self.calculate_entailment(group.claim_text, source.excerpt)
                contradiction = self.calculate_contradiction(group.claim_text, source.excerpt)
                analysis.entailment_scores.append(entailment)
                analysis.contradiction_scores.append(contradiction)
                analysis.neutral_scores.append(1.0 - entailment - contradiction)

        sentences = split_sentences(text)
        analysis.requires_multi_hop = self.requires_multi_hop(text, sentences)

        if analysis.entailment_scores:
            analysis.semantic_similarity = sum(analysis.entailment_scores) / len(analysis.entailment_scores)

        analysis.logical_consistency = self.calculate_logical_consistency(sentences)
        return analysis

    def calculate_entailment(self, claim_text: str, excerpt: str) -> float:
        """Token overlap over the longer token list, boosted by assertive verbs."""
        base_score = symmetric_overlap(tokenize(claim_text), tokenize(excerpt))
        if ASSERTIVE_VERBS.matches(excerpt):
            base_score += ScoreDefaults.ASSERTIVE_VERB_BONUS
        return min(base_score, 1.0)

    def calculate_contradiction(self, claim_text: str, excerpt: str) -> float:
        """Placeholder contradiction strength; higher when the excerpt denies something."""
        if DENIAL_CUES.matches(excerpt):
            low, high = ScoreDefaults.CONTRADICTION_HIGH_RANGE
        else:
            low, high = ScoreDefaults.CONTRADICTION_LOW_RANGE
        return self.sampler.uniform(low, high, f"contradiction:{claim_text}|{excerpt}")

    def requires_multi_hop(self, text: str, sentences: Optional[List[str]] = None) -> bool:
        if sentences is None:
            sentences = split_sentences(text)
        return len(sentences) >= ScoreDefaults.MULTI_HOP_MIN_SENTENCES and CAUSAL_CONNECTIVES.matches(text)

    def calculate_logical_consistency(self, sentences: List[str]) -> float:
        """Penalize adjacent sentences that overlap heavily but flip negation."""
        if len(sentences) < 2:
            return ScoreDefaults.SINGLE_SENTENCE_CONSISTENCY

        score = ScoreDefaults.BASE_CONSISTENCY
        for current, following in zip(sentences, sentences[1:]):
            if SENTENCE_NEGATIONS.matches(current) == SENTENCE_NEGATIONS.matches(following):
                continue
            if symmetric_overlap(tokenize(current), tokenize(following)) > ScoreDefaults.NEGATION_FLIP_OVERLAP:
                score -= ScoreDefaults.NEGATION_FLIP_PENALTY

        return max(ScoreDefaults.MIN_CONSISTENCY, score)
