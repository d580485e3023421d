"""
Keyword rule tables used by the pipeline.

Every keyword-driven decision (checkworthiness, claim category, priority
boosts, source tiers, negation and causal cues) is declared here as an
ordered, tagged table so the rules can be audited and tested in isolation.
Keywords match whole words, case-insensitively.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Pattern, Tuple

from .models import ClaimCategory, SourceType


@dataclass(frozen=True)
class KeywordRule:
    """A tag paired with the keywords that select it."""
    tag: Any
    keywords: Tuple[str, ...]

    @property
    def pattern(self) -> Pattern:
        return _compile(self.keywords)

    def matches(self, text: str) -> bool:
        return bool(text) and self.pattern.search(text) is not None

    def find_all(self, text: str) -> List[str]:
        return self.pattern.findall(text or "")


class KeywordTable:
    """Ordered rules; the first rule whose keywords appear wins."""

    def __init__(self, rules: Iterable[KeywordRule], default: Any = None):
        self.rules = tuple(rules)
        self.default = default

    def classify(self, text: str) -> Any:
        for rule in self.rules:
            if rule.matches(text):
                return rule.tag
        return self.default

    def matching_tags(self, text: str) -> List[Any]:
        return [rule.tag for rule in self.rules if rule.matches(text)]

    def rule_for(self, tag: Any) -> Optional[KeywordRule]:
        for rule in self.rules:
            if rule.tag == tag:
                return rule
        return None


_PATTERN_CACHE = {}


def _compile(keywords: Tuple[str, ...]) -> Pattern:
    pattern = _PATTERN_CACHE.get(keywords)
    if pattern is None:
        # Multi-word keywords ("due to") tolerate any run of whitespace
        alternatives = [r'\s+'.join(re.escape(part) for part in keyword.split()) for keyword in keywords]
        pattern = re.compile(r'\b(?:' + '|'.join(alternatives) + r')\b', re.IGNORECASE)
        _PATTERN_CACHE[keywords] = pattern
    return pattern


# Checkworthiness
FACTUAL_REGISTER = KeywordRule('factual', (
    'study', 'research', 'data', 'statistics', 'percent',
    'number', 'evidence', 'proven', 'showed', 'found',
))
REPORTING_REGISTER = KeywordRule('reporting', ('claims', 'states', 'reports', 'according'))

# Claim categories, checked in order
CATEGORY_TABLE = KeywordTable([
    KeywordRule(ClaimCategory.CLIMATE, ('climate', 'temperature', 'temperatures', 'warming', 'carbon')),
    KeywordRule(ClaimCategory.HEALTH, ('vaccine', 'vaccines', 'covid', 'virus', 'medicine')),
    KeywordRule(ClaimCategory.POLITICS, ('election', 'elections', 'vote', 'votes', 'fraud', 'ballot', 'ballots')),
    KeywordRule(ClaimCategory.ECONOMICS, ('economy', 'stock', 'stocks', 'financial', 'money')),
], default=ClaimCategory.GENERAL)

# Priority boosts; every matching rule adds its tag
PRIORITY_TABLE = KeywordTable([
    KeywordRule(0.3, ('breaking', 'urgent', 'new', 'latest')),
    KeywordRule(0.2, ('study', 'research', 'data')),
    KeywordRule(0.25, ('death', 'danger', 'risk', 'harmful')),
])

# Entailment and contradiction cues in evidence excerpts
ASSERTIVE_VERBS = KeywordRule('assertive', ('shows', 'indicates', 'proves', 'demonstrates', 'confirms'))
DENIAL_CUES = KeywordRule('denial', (
    'not', 'no', 'never', 'false', 'incorrect', 'wrong', 'disputes', 'denies',
))

# Text-level cues
SENTENCE_NEGATIONS = KeywordRule('negation', ('not', 'no', 'never'))
CAUSAL_CONNECTIVES = KeywordRule('causal', ('because', 'therefore', 'thus', 'since', 'due to', 'as a result'))

# Source authority tiers, checked in order
SOURCE_TYPE_TABLE = KeywordTable([
    KeywordRule(SourceType.AUTHORITATIVE, ('WHO', 'CDC', 'NASA', 'IPCC', 'Nature', 'Science', 'Lancet')),
    KeywordRule(SourceType.ACADEMIC, ('University', 'Research', 'Study', 'Journal')),
    KeywordRule(SourceType.GOVERNMENTAL, ('Government', 'Official', 'Federal')),
], default=SourceType.OTHER)

# Time references: years, d/m/yyyy dates and relative day words
TIME_REFERENCE_PATTERN = re.compile(
    r'\b(?:20\d{2}|\d{1,2}/\d{1,2}/\d{4}|today|yesterday|recently)\b',
    re.IGNORECASE,
)
TITLE_YEAR_PATTERN = re.compile(r'\b(20\d{2})\b')
