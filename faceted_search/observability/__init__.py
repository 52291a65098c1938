"""Observability module for structured logging."""

from faceted_search.observability.logging import configure_logging, request_context


__all__ = ["configure_logging", "request_context"]
