"""
Source credibility assessment.
Aggregates source credibility and sorts sources into authority tiers.
"""

from typing import List

from ..core.keywords import SOURCE_TYPE_TABLE
from ..core.models import CredibilityAssessment, EvidenceGroup, SourceType


class CredibilityScorer:
    """Summarizes the credibility of every retrieved source."""

    def assess(self, evidence: List[EvidenceGroup]) -> CredibilityAssessment:
        """
        Build the credibility assessment for all sources across all groups.

        Args:
            evidence: Evidence groups from the retriever

        Returns:
            CredibilityAssessment aligned with the flattened source list
        """
        assessment = CredibilityAssessment()

        for group in evidence:
            for source in group.sources:
                assessment.authority_scores.append(source.credibility)
                assessment.source_types.append(self.classify_source(source.title))

        if assessment.authority_scores:
            assessment.average_credibility = sum(assessment.authority_scores) / len(assessment.authority_scores)

        return assessment

    def classify_source(self, title: str) -> SourceType:
        return SOURCE_TYPE_TABLE.classify(title)
