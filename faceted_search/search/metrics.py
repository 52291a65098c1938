"""Metrics collection for the search service."""

from collections import Counter
from dataclasses import dataclass, field
from threading import Lock


# Module-level singleton state (proper pattern for thread-safe singleton)
_metrics_instance: "SearchMetrics | None" = None
_metrics_lock: Lock = Lock()


@dataclass
class SearchMetrics:
    """Thread-safe metrics for search requests.

    Use get_instance() for singleton access.
    """

    # Instance-level lock for thread-safe operations
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    requests_total: int = 0
    requests_by_sort_key: Counter[str] = field(default_factory=Counter)
    unknown_sort_keys_total: int = 0
    items_by_content_type: Counter[str] = field(default_factory=Counter)
    pinned_total: int = 0
    cross_domain_pins_total: int = 0
    malformed_payloads_total: int = 0

    @classmethod
    def get_instance(cls) -> "SearchMetrics":
        """Get the singleton instance (thread-safe).

        Returns:
            The shared SearchMetrics instance.
        """
        global _metrics_instance  # noqa: PLW0603
        if _metrics_instance is None:
            with _metrics_lock:
                # Double-checked locking
                if _metrics_instance is None:
                    _metrics_instance = cls()
        return _metrics_instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        global _metrics_instance  # noqa: PLW0603
        with _metrics_lock:
            _metrics_instance = None

    def record_request(self, sort_key: str, normalized: bool) -> None:
        """Record a planned or aggregated request.

        Args:
            sort_key: Resolved sort key.
            normalized: Whether the requested key was unknown.
        """
        with self._lock:
            self.requests_total += 1
            self.requests_by_sort_key[sort_key] += 1
            if normalized:
                self.unknown_sort_keys_total += 1

    def record_items(self, content_type: str, count: int) -> None:
        """Record merged items of one content type.

        Args:
            content_type: Content type of the items.
            count: Number of items.
        """
        with self._lock:
            self.items_by_content_type[content_type] += count

    def record_pins(self, pinned: int, cross_domain: int) -> None:
        """Record pinned results of one response.

        Args:
            pinned: Results promoted on the active domain.
            cross_domain: High-scoring results left unpinned for another domain.
        """
        with self._lock:
            self.pinned_total += pinned
            self.cross_domain_pins_total += cross_domain

    def record_malformed_payload(self) -> None:
        """Record a response rejected by shape validation."""
        with self._lock:
            self.malformed_payloads_total += 1

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        with self._lock:
            return {
                "requests_total": self.requests_total,
                "requests_by_sort_key": dict(self.requests_by_sort_key),
                "unknown_sort_keys_total": self.unknown_sort_keys_total,
                "items_by_content_type": dict(self.items_by_content_type),
                "pinned_total": self.pinned_total,
                "cross_domain_pins_total": self.cross_domain_pins_total,
                "malformed_payloads_total": self.malformed_payloads_total,
            }
