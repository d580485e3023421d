"""
Tests for the evidence knowledge base.
"""

import json

import pytest

from factcheck.core.knowledge_base import KnowledgeBase
from factcheck.core.models import ClaimCategory, KnowledgeSource
from factcheck.errors import ErrorCategory, KnowledgeBaseError


def source_record(**overrides):
    record = {"title": "Tide Tables 2024", "credibility": 0.8, "supports": True,
              "excerpt": "Tides rise twice a day"}
    record.update(overrides)
    return record


class TestDefaultKnowledgeBase:
    """Test the seed topics."""

    def setup_method(self):
        self.kb = KnowledgeBase.default()

    def test_seed_topics(self):
        assert self.kb.topics == ("climate change", "vaccine", "election")
        assert len(self.kb) == 3
        assert self.kb.source_count() == 9

    def test_all_seed_sources_support(self):
        assert all(source.supports for _, sources in self.kb.items() for source in sources)

    def test_category_topics(self):
        assert self.kb.topic_for_category(ClaimCategory.CLIMATE) == "climate change"
        assert self.kb.topic_for_category(ClaimCategory.HEALTH) == "vaccine"
        assert self.kb.topic_for_category(ClaimCategory.POLITICS) == "election"
        assert self.kb.topic_for_category(ClaimCategory.ECONOMICS) is None

    def test_lookup_is_case_insensitive(self):
        assert "Climate Change" in self.kb
        assert len(self.kb.sources_for(" VACCINE ")) == 3
        assert self.kb.sources_for("tides") == ()

    def test_read_only(self):
        with pytest.raises(TypeError):
            self.kb._topics["tides"] = ()

    def test_to_dict_round_trips(self):
        rebuilt = KnowledgeBase.from_dict(self.kb.to_dict())
        assert rebuilt.to_dict() == self.kb.to_dict()


class TestFromDict:
    """Test building knowledge bases from records."""

    def test_list_and_sources_forms(self):
        kb = KnowledgeBase.from_dict({
            "Tides": [source_record()],
            "storms": {"sources": [source_record(title="Storm Atlas", supports=False)]},
        })

        assert kb.topics == ("tides", "storms")
        assert kb.sources_for("tides")[0] == KnowledgeSource(
            title="Tide Tables 2024", credibility=0.8, supports=True, excerpt="Tides rise twice a day")
        assert kb.sources_for("storms")[0].supports is False

    def test_custom_category_topics(self):
        kb = KnowledgeBase.from_dict({"markets": []}, category_topics={ClaimCategory.ECONOMICS: "Markets"})
        assert kb.topic_for_category(ClaimCategory.ECONOMICS) == "markets"

    @pytest.mark.parametrize("data", [
        ["not", "a", "mapping"],
        {"tides": "not a list"},
        {"tides": ["not a mapping"]},
        {"tides": [{"title": "Missing fields"}]},
        {"tides": [source_record(credibility="high")]},
        {"tides": [source_record(credibility=1.5)]},
        {"tides": [source_record(supports="yes")]},
        {"": [source_record()]},
        {"Tides": [], "tides ": []},
    ])
    def test_invalid_data(self, data):
        with pytest.raises(KnowledgeBaseError) as exc_info:
            KnowledgeBase.from_dict(data)
        assert exc_info.value.category == ErrorCategory.CONFIGURATION_ERROR

    def test_missing_fields_are_named(self):
        with pytest.raises(KnowledgeBaseError, match="credibility, supports, excerpt"):
            KnowledgeBase.from_dict({"tides": [{"title": "Tide Tables"}]})


class TestFromJsonFile:
    """Test loading knowledge bases from disk."""

    def test_load(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text(json.dumps({"tides": [source_record()]}), encoding="utf-8")

        kb = KnowledgeBase.from_json_file(path)

        assert kb.topics == ("tides",)
        assert kb.source_count() == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(KnowledgeBaseError, match="Cannot read"):
            KnowledgeBase.from_json_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(KnowledgeBaseError, match="not valid JSON"):
            KnowledgeBase.from_json_file(path)
