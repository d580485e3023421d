"""
Evidence knowledge base.

A read-only mapping from topic keyword to the evidence sources filed under
it. Instances are constructed explicitly and injected into the retriever;
nothing in the pipeline mutates them.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from ..errors import KnowledgeBaseError
from .models import ClaimCategory, KnowledgeSource

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_TOPICS: Mapping[ClaimCategory, str] = MappingProxyType({
    ClaimCategory.CLIMATE: "climate change",
    ClaimCategory.HEALTH: "vaccine",
    ClaimCategory.POLITICS: "election",
})

SEED_TOPICS: Dict[str, List[Dict[str, Any]]] = {
    "climate change": [
        {"title": "IPCC Climate Report 2023", "credibility": 0.95, "supports": True,
         "excerpt": "Global temperatures have risen 1.1°C since pre-industrial times"},
        {"title": "NASA Climate Data", "credibility": 0.93, "supports": True,
         "excerpt": "2023 was the warmest year on record globally"},
        {"title": "Nature Climate Science", "credibility": 0.91, "supports": True,
         "excerpt": "Human activities are primary driver of recent climate change"},
    ],
    "vaccine": [
        {"title": "WHO Vaccine Safety Report", "credibility": 0.94, "supports": True,
         "excerpt": "COVID-19 vaccines have excellent safety profile with rare serious adverse events"},
        {"title": "CDC Vaccine Monitoring", "credibility": 0.92, "supports": True,
         "excerpt": "VAERS data shows vaccines are safe and effective"},
        {"title": "Lancet Vaccine Study", "credibility": 0.90, "supports": True,
         "excerpt": "mRNA vaccines show 95% efficacy in clinical trials"},
    ],
    "election": [
        {"title": "Official Election Results", "credibility": 0.96, "supports": True,
         "excerpt": "No evidence of widespread fraud in 2020 election"},
        {"title": "Court Records Database", "credibility": 0.94, "supports": True,
         "excerpt": "60+ lawsuits challenging election results were dismissed"},
        {"title": "Election Security Report", "credibility": 0.91, "supports": True,
         "excerpt": "2020 election was most secure in American history"},
    ],
}


class KnowledgeBase:
    """Immutable topic -> sources mapping with a category -> topic fallback."""

    def __init__(self, topics: Mapping[str, Sequence[KnowledgeSource]],
                 category_topics: Optional[Mapping[ClaimCategory, str]] = None):
        frozen = {}
        for topic, sources in topics.items():
            key = topic.strip().lower()
            if not key:
                raise KnowledgeBaseError("Knowledge base topics must be non-empty strings")
            if key in frozen:
                raise KnowledgeBaseError(f"Duplicate knowledge base topic '{key}'")
            frozen[key] = tuple(sources)
        self._topics = MappingProxyType(frozen)
        if category_topics is None:
            category_topics = DEFAULT_CATEGORY_TOPICS
        self._category_topics = MappingProxyType(
            {category: topic.strip().lower() for category, topic in category_topics.items()})

    @property
    def topics(self) -> Tuple[str, ...]:
        """Topic keywords in lookup order."""
        return tuple(self._topics.keys())

    @property
    def category_topics(self) -> Mapping[ClaimCategory, str]:
        return self._category_topics

    def sources_for(self, topic: str) -> Tuple[KnowledgeSource, ...]:
        return self._topics.get(topic.strip().lower(), ())

    def topic_for_category(self, category: ClaimCategory) -> Optional[str]:
        return self._category_topics.get(category)

    def items(self) -> Iterator[Tuple[str, Tuple[KnowledgeSource, ...]]]:
        return iter(self._topics.items())

    def source_count(self) -> int:
        return sum(len(sources) for sources in self._topics.values())

    def __len__(self) -> int:
        return len(self._topics)

    def __contains__(self, topic: object) -> bool:
        return isinstance(topic, str) and topic.strip().lower() in self._topics

    def __repr__(self) -> str:
        return f"KnowledgeBase(topics={list(self._topics)}, sources={self.source_count()})"

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {topic: [source.to_dict() for source in sources] for topic, sources in self._topics.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any],
                  category_topics: Optional[Mapping[ClaimCategory, str]] = None) -> 'KnowledgeBase':
        """
        Build a knowledge base from plain records.

        Each topic maps to a list of ``{title, credibility, supports, excerpt}``
        records, or to ``{"sources": [...]}``.
        """
        if not isinstance(data, Mapping):
            raise KnowledgeBaseError("Knowledge base must be a mapping of topic to sources")

        topics = {}
        for topic, records in data.items():
            if not isinstance(topic, str):
                raise KnowledgeBaseError(f"Topic keys must be strings, got {type(topic).__name__}")
            if isinstance(records, Mapping):
                records = records.get('sources', [])
            if not isinstance(records, (list, tuple)):
                raise KnowledgeBaseError(f"Sources for topic '{topic}' must be a list")
            topics[topic] = [_parse_source(topic, record) for record in records]
        return cls(topics, category_topics)

    @classmethod
    def from_json_file(cls, path: Union[str, Path],
                       category_topics: Optional[Mapping[ClaimCategory, str]] = None) -> 'KnowledgeBase':
        """Load a knowledge base from a JSON file in the ``from_dict`` format."""
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise KnowledgeBaseError(f"Cannot read knowledge base file {path}: {e}")
        except json.JSONDecodeError as e:
            raise KnowledgeBaseError(f"Knowledge base file {path} is not valid JSON: {e}")

        knowledge_base = cls.from_dict(data, category_topics)
        logger.info(f"Loaded knowledge base from {path}: {len(knowledge_base)} topics, "
                    f"{knowledge_base.source_count()} sources")
        return knowledge_base

    @classmethod
    def default(cls) -> 'KnowledgeBase':
        """The seed knowledge base covering climate change, vaccines and elections."""
        return cls.from_dict(SEED_TOPICS)


def _parse_source(topic: str, record: Any) -> KnowledgeSource:
    if not isinstance(record, Mapping):
        raise KnowledgeBaseError(f"Source under '{topic}' must be a mapping")

    missing = [name for name in ('title', 'credibility', 'supports', 'excerpt') if name not in record]
    if missing:
        raise KnowledgeBaseError(f"Source under '{topic}' is missing fields: {', '.join(missing)}")

    try:
        credibility = float(record['credibility'])
    except (TypeError, ValueError):
        raise KnowledgeBaseError(f"Credibility of '{record['title']}' must be a number")
    if not 0.0 <= credibility <= 1.0:
        raise KnowledgeBaseError(f"Credibility of '{record['title']}' must be within [0, 1]")

    if not isinstance(record['supports'], bool):
        raise KnowledgeBaseError(f"'supports' of '{record['title']}' must be a boolean")

    return KnowledgeSource(
        title=str(record['title']),
        credibility=credibility,
        supports=record['supports'],
        excerpt=str(record['excerpt']),
    )
