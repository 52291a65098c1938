"""Unit tests for structured logging setup."""

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from faceted_search.observability import configure_logging, request_context


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


def _records(output: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in output.getvalue().splitlines()]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self) -> None:
        output = io.StringIO()
        configure_logging(output=output, json_format=True)
        structlog.get_logger().info("facets_merged", type_count=2)

        (record,) = _records(output)
        assert record["event"] == "facets_merged"
        assert record["type_count"] == 2
        assert record["level"] == "info"
        assert str(record["timestamp"]).endswith("Z")

    def test_level_filtering(self) -> None:
        output = io.StringIO()
        configure_logging(level=logging.WARNING, output=output)
        structlog.get_logger().info("queries_planned")
        assert output.getvalue() == ""

    def test_console_output(self) -> None:
        output = io.StringIO()
        configure_logging(output=output, json_format=False)
        structlog.get_logger().warning("malformed_item_replaced")
        assert "malformed_item_replaced" in output.getvalue()


class TestRequestContext:
    """Tests for request_context."""

    def test_request_id_scoped_to_block(self) -> None:
        output = io.StringIO()
        configure_logging(output=output)
        log = structlog.get_logger()

        with request_context("req-1"):
            log.info("search_response_built")
        log.info("search_response_built")

        inside, after = _records(output)
        assert inside["request_id"] == "req-1"
        assert "request_id" not in after

    def test_nested_context_restores_outer_id(self) -> None:
        output = io.StringIO()
        configure_logging(output=output)
        log = structlog.get_logger()

        with request_context("outer"):
            with request_context("inner"):
                log.info("results_merged")
            log.info("results_merged")

        inner, outer = _records(output)
        assert inner["request_id"] == "inner"
        assert outer["request_id"] == "outer"
