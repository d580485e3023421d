"""
Tests for the fact-check configuration.
"""

import os
from unittest.mock import patch

import pytest

from factcheck.config import FactCheckConfig, ScoringWeights, VerdictThresholds
from factcheck.constants import ConfigDefaults


class TestScoringWeights:
    """Test score fusion weights."""

    def test_defaults(self):
        weights = ScoringWeights()
        assert (weights.semantic, weights.credibility, weights.consistency) == (0.4, 0.3, 0.3)

    def test_must_sum_to_one(self):
        with pytest.raises(ValueError, match="sum to 1.0"):
            ScoringWeights(semantic=0.5, credibility=0.3, consistency=0.3)

    def test_must_be_non_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            ScoringWeights(semantic=1.2, credibility=-0.2, consistency=0.0)


class TestVerdictThresholds:
    """Test decision table thresholds."""

    def test_defaults(self):
        thresholds = VerdictThresholds()
        assert thresholds.verified_true_score == 0.8
        assert thresholds.likely_true_score == 0.6
        assert thresholds.likely_false_score == 0.4
        assert thresholds.verified_false_score == 0.2
        assert thresholds.human_review_uncertainty == 0.3

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="likely_true_score"):
            VerdictThresholds(likely_true_score=1.5)


class TestFactCheckConfig:
    """Test the pipeline configuration."""

    def test_defaults(self):
        config = FactCheckConfig()

        assert config.max_claims == ConfigDefaults.MAX_CLAIMS
        assert config.reference_year == 2025
        assert config.sampler_seed == 0
        assert config.knowledge_base_path is None

    @pytest.mark.parametrize("overrides", [
        {"max_claims": 0},
        {"min_sentence_length": -1},
        {"claim_id_length": 0},
        {"reference_year": 1999},
        {"max_workers": 0},
        {"log_level": "LOUD"},
    ])
    def test_validation(self, overrides):
        with pytest.raises(ValueError):
            FactCheckConfig(**overrides)

    def test_dict_round_trip(self):
        config = FactCheckConfig(max_claims=5, weights=ScoringWeights(0.5, 0.25, 0.25))
        rebuilt = FactCheckConfig.from_dict(config.to_dict())

        assert rebuilt == config
        assert rebuilt.weights.semantic == 0.5

    def test_from_env(self):
        env = {
            'FACTCHECK_MAX_CLAIMS': '2',
            'FACTCHECK_REFERENCE_YEAR': '2026',
            'FACTCHECK_MAX_WORKERS': '4',
            'FACTCHECK_SAMPLER_SEED': '11',
            'FACTCHECK_LOG_LEVEL': 'DEBUG',
            'FACTCHECK_KNOWLEDGE_BASE': '/tmp/kb.json',
        }
        with patch.dict(os.environ, env):
            config = FactCheckConfig.from_env()

        assert config.max_claims == 2
        assert config.reference_year == 2026
        assert config.max_workers == 4
        assert config.sampler_seed == 11
        assert config.log_level == 'DEBUG'
        assert config.knowledge_base_path == '/tmp/kb.json'

    def test_from_env_defaults(self):
        keys = ['FACTCHECK_MAX_CLAIMS', 'FACTCHECK_REFERENCE_YEAR', 'FACTCHECK_MAX_WORKERS',
                'FACTCHECK_SAMPLER_SEED', 'FACTCHECK_LOG_LEVEL', 'FACTCHECK_KNOWLEDGE_BASE']
        with patch.dict(os.environ, {}):
            for key in keys:
                os.environ.pop(key, None)
            config = FactCheckConfig.from_env()

        assert config == FactCheckConfig()

    def test_from_env_invalid_integer(self):
        with patch.dict(os.environ, {'FACTCHECK_MAX_CLAIMS': 'many'}):
            with pytest.raises(ValueError, match="FACTCHECK_MAX_CLAIMS"):
                FactCheckConfig.from_env()

    def test_str(self):
        assert str(FactCheckConfig()).startswith("FactCheckConfig({'max_claims': 3")
