"""
Tests for the fact-check API facade.
"""

import threading

import pytest

from factcheck import FactCheckAPI, analyze, create_factcheck_api
from factcheck.core.knowledge_base import KnowledgeBase
from factcheck.core.models import ClaimCategory, VerdictClassification
from factcheck.errors import AnalysisCancelledError, InvalidInputError

CLIMATE_TEXT = ("Global temperatures have risen 1.1 degrees since pre-industrial "
                "times according to a new study.")


class TestFactCheckAPI:
    """Test the API wrapper."""

    def setup_method(self):
        self.api = create_factcheck_api()

    def test_factory_returns_api(self):
        assert isinstance(self.api, FactCheckAPI)
        assert self.api.knowledge_base.source_count() == 9

    def test_analyze(self):
        report = self.api.analyze(CLIMATE_TEXT)
        assert report.verdict.classification == VerdictClassification.LIKELY_TRUE

    def test_analyze_passes_callbacks(self):
        stages = []
        self.api.analyze(CLIMATE_TEXT, on_stage=lambda stage, pct: stages.append(pct))
        assert stages == [16, 33, 50, 66, 83, 100]

    def test_analyze_passes_cancel_event(self):
        event = threading.Event()
        event.set()
        with pytest.raises(AnalysisCancelledError):
            self.api.analyze(CLIMATE_TEXT, cancel_event=event)

    def test_analyze_rejects_blank_text(self):
        with pytest.raises(InvalidInputError):
            self.api.analyze("")

    def test_extract_claims(self):
        claims = self.api.extract_claims(CLIMATE_TEXT)

        assert len(claims) == 1
        assert claims[0].category == ClaimCategory.CLIMATE

    def test_component_status(self):
        status = self.api.get_component_status()

        assert status["verdict_classifier"] == "operational"
        assert status["knowledge_base"] == "operational"


class TestHealthCheck:
    """Test health reporting."""

    def test_healthy(self):
        health = create_factcheck_api().health_check()

        assert health["status"] == "healthy"
        assert "issues" not in health
        assert health["knowledge_base"]["topics"] == ["climate change", "vaccine", "election"]
        assert health["config"]["reference_year"] == 2025

    def test_empty_knowledge_base_is_degraded(self):
        health = create_factcheck_api(knowledge_base=KnowledgeBase({})).health_check()

        assert health["status"] == "degraded"
        assert health["issues"] == ["Knowledge base has no topics"]
        assert health["components"]["knowledge_base"] == "empty"

    def test_unmatched_knowledge_base_is_degraded(self):
        kb = KnowledgeBase({"tides": []}, category_topics={})
        health = create_factcheck_api(knowledge_base=kb).health_check()

        assert health["status"] == "degraded"
        assert "Evidence retrieval returned no evidence for the smoke-test claim" in health["issues"]


class TestModuleAnalyze:
    """Test the convenience function."""

    def test_analyze(self):
        report = analyze(CLIMATE_TEXT)
        assert report.verdict.evidence_count == 3
