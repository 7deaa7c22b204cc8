"""Tests for matching configuration."""

import pytest


class TestMatchingConfig:
    """Test MatchingConfig settings."""

    def test_matching_config_has_defaults(self):
        """MatchingConfig should load the published default weights."""
        from src.matching.config import DEFAULT_WEIGHTS, MatchingConfig

        config = MatchingConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.weights == DEFAULT_WEIGHTS
        assert config.weight_skills == 0.30
        assert config.weight_experience == 0.25
        assert config.weight_location == 0.15
        assert config.weight_salary == 0.15
        assert config.weight_education == 0.10
        assert config.weight_industry == 0.05
        assert config.skill_fuzzy_threshold == 0.7
        assert config.skill_fuzzy_weight == 0.7
        assert config.skill_aliases is True

    def test_default_weights_sum_to_one(self):
        """Published weights form a convex combination."""
        from src.matching.config import DEFAULT_WEIGHTS

        assert sum(DEFAULT_WEIGHTS.values()) == pytest.approx(1.0)

    def test_matching_config_reads_from_environment_variables(self, monkeypatch):
        """MatchingConfig should read MATCHING_ variables."""
        from src.matching.config import MatchingConfig

        monkeypatch.setenv("MATCHING_SKILL_FUZZY_THRESHOLD", "0.8")
        monkeypatch.setenv("MATCHING_SKILL_ALIASES", "false")

        config = MatchingConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.skill_fuzzy_threshold == 0.8
        assert config.skill_aliases is False

    def test_matching_config_validates_weights_sum_to_one(self):
        """Weights that do not sum to 1.0 are rejected."""
        from pydantic import ValidationError

        from src.matching.config import MatchingConfig

        with pytest.raises(ValidationError):
            MatchingConfig(
                _env_file=None,  # type: ignore[call-arg]
                weight_skills=0.5,
            )


class TestGetMatchingConfig:
    """Test get_matching_config function."""

    def test_get_matching_config_is_singleton(self):
        """get_matching_config should return the same instance."""
        from src.matching.config import get_matching_config, reset_matching_config

        reset_matching_config()
        config1 = get_matching_config()
        config2 = get_matching_config()

        assert config1 is config2

    def test_reset_matching_config_clears_singleton(self):
        """reset_matching_config should clear the singleton."""
        from src.matching.config import get_matching_config, reset_matching_config

        config1 = get_matching_config()
        reset_matching_config()
        config2 = get_matching_config()

        assert config1 is not config2
