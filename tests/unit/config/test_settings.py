"""Tests for Settings configuration class."""

from pathlib import Path

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove JOB_MATCH_ variables that would leak into Settings."""
    for var in (
        "JOB_MATCH_PROFILE_PATH",
        "JOB_MATCH_JOBS_PATH",
        "JOB_MATCH_OUTPUT_FORMAT",
        "JOB_MATCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


class TestSettingsDefaults:
    """Test that Settings loads sensible defaults."""

    def test_settings_loads_with_defaults(self, clean_env):
        """Settings should load with default values when no env vars are set."""
        from src.config.settings import OutputFormat, Settings

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.profile_path == Path("profiles/profile.yaml")
        assert settings.jobs_path is None
        assert settings.output_format is OutputFormat.TEXT
        assert settings.log_level == "INFO"


class TestSettingsFromEnvironment:
    """Test that Settings reads JOB_MATCH_ variables."""

    def test_settings_reads_paths(self, clean_env, monkeypatch, tmp_path):
        """Paths come from the environment."""
        from src.config.settings import Settings

        monkeypatch.setenv("JOB_MATCH_PROFILE_PATH", str(tmp_path / "me.yaml"))
        monkeypatch.setenv("JOB_MATCH_JOBS_PATH", str(tmp_path / "jobs"))

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.profile_path == tmp_path / "me.yaml"
        assert settings.jobs_path == tmp_path / "jobs"

    def test_output_format_is_case_insensitive(self, clean_env, monkeypatch):
        """'JSON' and 'json' both select JSON output."""
        from src.config.settings import OutputFormat, Settings

        monkeypatch.setenv("JOB_MATCH_OUTPUT_FORMAT", " JSON ")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.output_format is OutputFormat.JSON

    def test_log_level_is_uppercased(self, clean_env, monkeypatch):
        """Log level is normalized to upper case."""
        from src.config.settings import Settings

        monkeypatch.setenv("JOB_MATCH_LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"  # type: ignore[call-arg]


class TestSettingsValidation:
    """Test Settings validators."""

    def test_invalid_output_format_raises(self, clean_env):
        """Unknown output formats are rejected."""
        from pydantic import ValidationError

        from src.config.settings import Settings

        with pytest.raises(ValidationError, match="Invalid output format"):
            Settings(_env_file=None, output_format="xml")  # type: ignore[call-arg]

    def test_invalid_log_level_raises(self, clean_env):
        """Unknown log levels are rejected."""
        from pydantic import ValidationError

        from src.config.settings import Settings

        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="LOUD")  # type: ignore[call-arg]


class TestGetSettings:
    """Test get_settings function."""

    def test_get_settings_is_singleton(self, clean_env):
        """get_settings should return the same instance."""
        from src.config.settings import get_settings, reset_settings

        reset_settings()

        assert get_settings() is get_settings()

    def test_reset_settings_clears_singleton(self, clean_env):
        """reset_settings should clear the singleton."""
        from src.config.settings import get_settings, reset_settings

        settings1 = get_settings()
        reset_settings()

        assert settings1 is not get_settings()
