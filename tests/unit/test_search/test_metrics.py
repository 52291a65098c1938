"""Tests for SearchMetrics."""

from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor

import pytest

from faceted_search.search import SearchMetrics


@pytest.fixture(autouse=True)
def reset_metrics() -> Generator[None]:
    """Reset singleton before and after each test."""
    SearchMetrics.reset()
    yield
    SearchMetrics.reset()


class TestSearchMetricsSingleton:
    """Tests for singleton pattern."""

    def test_get_instance_returns_same_instance(self) -> None:
        """get_instance returns the same instance each time."""
        assert SearchMetrics.get_instance() is SearchMetrics.get_instance()

    def test_reset_clears_singleton(self) -> None:
        """reset clears the singleton, allowing new instance creation."""
        instance1 = SearchMetrics.get_instance()
        instance1.record_request("relevance", normalized=False)
        SearchMetrics.reset()
        instance2 = SearchMetrics.get_instance()
        assert instance1 is not instance2
        assert instance2.requests_total == 0

    def test_singleton_thread_safe(self) -> None:
        """Singleton creation is thread-safe."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            instances = list(
                executor.map(lambda _: SearchMetrics.get_instance(), range(50))
            )
        assert all(instance is instances[0] for instance in instances)


class TestSearchMetricsRecording:
    """Tests for metric recording."""

    def test_record_request(self) -> None:
        metrics = SearchMetrics()
        metrics.record_request("relevance", normalized=True)
        metrics.record_request("date_desc", normalized=False)
        metrics.record_request("relevance", normalized=False)
        assert metrics.requests_total == 3
        assert metrics.requests_by_sort_key == {"relevance": 2, "date_desc": 1}
        assert metrics.unknown_sort_keys_total == 1

    def test_record_items_and_pins(self) -> None:
        metrics = SearchMetrics()
        metrics.record_items("ArticlePage", 3)
        metrics.record_items("ArticlePage", 2)
        metrics.record_pins(1, 2)
        assert metrics.items_by_content_type["ArticlePage"] == 5
        assert metrics.pinned_total == 1
        assert metrics.cross_domain_pins_total == 2

    def test_concurrent_recording(self) -> None:
        metrics = SearchMetrics()
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda _: metrics.record_malformed_payload(), range(200)))
        assert metrics.malformed_payloads_total == 200

    def test_to_dict(self) -> None:
        metrics = SearchMetrics()
        metrics.record_request("title_asc", normalized=False)
        metrics.record_items("Experience", 4)
        data = metrics.to_dict()
        assert data["requests_total"] == 1
        assert data["requests_by_sort_key"] == {"title_asc": 1}
        assert data["items_by_content_type"] == {"Experience": 4}
        assert data["malformed_payloads_total"] == 0
