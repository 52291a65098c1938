"""Unit tests for the preview CLI."""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from faceted_search.cli.preview import cli
from faceted_search.search import SearchMetrics
from tests.helpers.payloads import (
    article_hit,
    experience_hit,
    query_response,
    type_facets,
)


@pytest.fixture(autouse=True)
def isolate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    """Isolate settings, metrics and logging configuration."""
    for name in (
        "SEARCH_SITE_DOMAIN",
        "SEARCH_USE_SEMANTIC",
        "SEARCH_EXCERPT_LENGTH",
        "SEARCH_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    SearchMetrics.reset()
    yield
    SearchMetrics.reset()
    structlog.reset_defaults()


def _write_json(path: Path, data: Any) -> str:
    """Write a JSON document and return its path."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestPlanCommand:
    """Tests for the plan command."""

    def test_default_plan(self) -> None:
        result = CliRunner().invoke(cli, ["plan"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "sortOrder": "relevance",
            "articlePageOrderBy": {"_ranking": "RELEVANCE"},
            "experienceOrderBy": {"_ranking": "RELEVANCE"},
        }

    def test_semantic_weight(self) -> None:
        result = CliRunner().invoke(
            cli, ["plan", "-q", "shoes", "--semantic", "--weight", "0.3"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["articlePageOrderBy"] == {
            "_ranking": "RELEVANCE",
            "_semanticWeight": 0.3,
        }

    def test_title_sort(self) -> None:
        result = CliRunner().invoke(cli, ["plan", "--sort", "title_desc"])
        assert json.loads(result.output)["experienceOrderBy"] == {
            "_metadata": {"displayName": "DESC"}
        }

    def test_unknown_sort_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["plan", "--sort", "popularity"])
        assert result.exit_code != 0

    def test_negative_weight_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["plan", "--weight", "-1"])
        assert result.exit_code != 0


class TestMergeCommand:
    """Tests for the merge command."""

    def test_merge(self, tmp_path: Path) -> None:
        article = _write_json(
            tmp_path / "article.json",
            query_response(
                [
                    article_hit("B", score=21000, published="2024-01-01"),
                ],
                type_facets(("News", 3)),
            ),
        )
        experience = _write_json(
            tmp_path / "experience.json",
            query_response(
                [experience_hit("A", score=500, published="2024-06-01")],
                type_facets(("News", 2), ("Landing", 1)),
            ),
        )

        result = CliRunner().invoke(
            cli,
            ["merge", article, experience, "--sort", "date_desc", "--domain", "x.com"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["pinnedCount"] == 1
        assert [item["__contentType"] for item in data["items"]] == [
            "ArticlePage",
            "Experience",
        ]
        assert data["facets"]["types"] == [
            {"name": "News", "count": 5},
            {"name": "Landing", "count": 1},
        ]

    def test_malformed_response_exits_nonzero(self, tmp_path: Path) -> None:
        article = _write_json(tmp_path / "article.json", {"items": "nope"})
        experience = _write_json(tmp_path / "experience.json", query_response())

        result = CliRunner().invoke(cli, ["merge", article, experience])

        assert result.exit_code == 1
        assert "Invalid ArticlePage response" in result.output

    def test_invalid_json_exits_nonzero(self, tmp_path: Path) -> None:
        article = tmp_path / "article.json"
        article.write_text("{not json", encoding="utf-8")
        experience = _write_json(tmp_path / "experience.json", query_response())

        result = CliRunner().invoke(cli, ["merge", str(article), experience])

        assert result.exit_code == 1
        assert "is not valid JSON" in result.output

    def test_summary_cards(self, tmp_path: Path) -> None:
        article = _write_json(
            tmp_path / "article.json",
            query_response(
                [
                    article_hit(
                        "Heading",
                        published="2024-01-15T10:30:00Z",
                        body="<p>" + "x" * 300 + "</p>",
                    )
                ]
            ),
        )
        experience = _write_json(tmp_path / "experience.json", query_response())

        result = CliRunner().invoke(cli, ["merge", article, experience, "--summary"])

        assert result.exit_code == 0
        (card,) = json.loads(result.output)["items"]
        assert card["contentType"] == "ArticlePage"
        assert card["title"] == "Heading"
        assert card["excerpt"] == "x" * 200 + "..."
        assert card["published"] == "January 15, 2024"
        assert card["imageUrl"] is None
        assert card["placeholder"].startswith("bg-gradient-to-br")

    def test_non_utf8_file_exits_nonzero(self, tmp_path: Path) -> None:
        article = tmp_path / "article.json"
        article.write_bytes(b'{"items": ["\xff\xfe"]}')
        experience = _write_json(tmp_path / "experience.json", query_response())

        result = CliRunner().invoke(cli, ["merge", str(article), experience])

        assert result.exit_code == 1
        assert "is not UTF-8 text" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
