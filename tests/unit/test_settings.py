"""Unit tests for search settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from faceted_search.settings import SearchSettings, get_settings


_ENV_VARS = (
    "SEARCH_SITE_DOMAIN",
    "SEARCH_USE_SEMANTIC",
    "SEARCH_SEMANTIC_WEIGHT",
    "SEARCH_EXCERPT_LENGTH",
    "SEARCH_LOG_JSON",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate settings from the host environment and any .env file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSearchSettings:
    """Tests for SearchSettings."""

    def test_defaults(self) -> None:
        settings = get_settings()
        assert settings.site_domain == ""
        assert settings.use_semantic_search is False
        assert settings.semantic_weight == 0.5
        assert settings.excerpt_length == 200
        assert settings.log_json is True

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_SITE_DOMAIN", "https://x.com/")
        monkeypatch.setenv("SEARCH_USE_SEMANTIC", "true")
        monkeypatch.setenv("SEARCH_SEMANTIC_WEIGHT", "0.75")
        monkeypatch.setenv("SEARCH_EXCERPT_LENGTH", "120")
        monkeypatch.setenv("SEARCH_LOG_JSON", "false")
        settings = SearchSettings()
        assert settings.site_domain == "https://x.com/"
        assert settings.use_semantic_search is True
        assert settings.semantic_weight == 0.75
        assert settings.excerpt_length == 120
        assert settings.log_json is False

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("SEARCH_SITE_DOMAIN=y.com\n", encoding="utf-8")
        assert SearchSettings().site_domain == "y.com"

    def test_negative_weight_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_SEMANTIC_WEIGHT", "-1")
        with pytest.raises(ValidationError):
            SearchSettings()

    def test_zero_excerpt_length_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SEARCH_EXCERPT_LENGTH", "0")
        with pytest.raises(ValidationError):
            SearchSettings()
