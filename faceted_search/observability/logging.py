"""Structured logging for the search library and its preview CLI."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied before rendering, whatever the output format."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(json_format: bool, output: TextIO) -> structlog.types.Processor:
    """Pick the final renderer; colors only when writing to a terminal."""
    if json_format:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=output.isatty())


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structlog for the search library.

    JSON lines suit the hosting service; the console renderer suits local
    CLI runs. Events below ``level`` are dropped before any processor runs.

    Args:
        level: Minimum level of emitted events.
        output: Stream the events are written to.
        json_format: Whether to render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[*_shared_processors(), _renderer(json_format, output)],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=output, level=level)


@contextmanager
def request_context(request_id: str) -> Iterator[None]:
    """Tag every event logged inside the block with a search request id.

    Args:
        request_id: Identifier of the search request being served.
    """
    with structlog.contextvars.bound_contextvars(request_id=request_id):
        yield
