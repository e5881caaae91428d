"""Tests for build settings."""

import pytest
from pydantic import ValidationError

from graphdesc.config import ENV_DUPLICATES, BuildSettings, DuplicatePolicy


class TestBuildSettings:
    def test_defaults(self):
        assert BuildSettings().duplicates is DuplicatePolicy.ALLOW_DUPLICATES

    def test_from_env(self):
        settings = BuildSettings.from_env({ENV_DUPLICATES: " Deduplicate "})
        assert settings.duplicates is DuplicatePolicy.DEDUPLICATE

    def test_from_env_empty(self):
        assert BuildSettings.from_env({}) == BuildSettings()

    def test_from_env_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_DUPLICATES, "deduplicate")
        assert BuildSettings.from_env().duplicates is DuplicatePolicy.DEDUPLICATE

    def test_from_env_invalid(self):
        with pytest.raises(ValidationError) as exc_info:
            BuildSettings.from_env({ENV_DUPLICATES: "sometimes"})
        assert "duplicates" in str(exc_info.value)

    def test_overrides_win(self):
        settings = BuildSettings.from_env({ENV_DUPLICATES: "deduplicate"})
        assert settings.with_overrides(duplicates="allow_duplicates").duplicates is (
            DuplicatePolicy.ALLOW_DUPLICATES
        )

    def test_none_override_ignored(self):
        settings = BuildSettings(duplicates=DuplicatePolicy.DEDUPLICATE)
        assert settings.with_overrides(duplicates=None) == settings

    def test_frozen(self):
        with pytest.raises(ValidationError):
            BuildSettings().duplicates = DuplicatePolicy.DEDUPLICATE
