"""CLI commands for previewing faceted search aggregation."""

import json
import logging
import sys
import uuid
from pathlib import Path
from typing import Any

import click

from faceted_search.content import (
    SearchResultItem,
    format_published_date,
    get_excerpt,
    get_image_alt,
    get_image_url,
    get_placeholder_style,
    get_title,
)
from faceted_search.observability.logging import configure_logging, request_context
from faceted_search.ordering import SortOrderKey
from faceted_search.search import (
    PayloadShapeError,
    SearchRequest,
    SearchService,
)
from faceted_search.settings import get_settings


SORT_CHOICES = [key.value for key in SortOrderKey]


def _load_response(path: Path) -> Any:
    """Load a saved query response from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed JSON document.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        click.echo(f"Error: {path} is not UTF-8 text: {e}", err=True)
        sys.exit(1)
    except json.JSONDecodeError as e:
        click.echo(f"Error: {path} is not valid JSON: {e}", err=True)
        sys.exit(1)


def _echo_json(data: Any) -> None:
    """Print a JSON document to stdout."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _summarize(item: SearchResultItem, excerpt_length: int) -> dict[str, Any]:
    """Flatten a result into the fields a result card displays."""
    image_url = get_image_url(item)
    return {
        "contentType": item.content_type.value,
        "title": get_title(item),
        "excerpt": get_excerpt(item, excerpt_length),
        "published": format_published_date(item.content.published),
        "imageUrl": image_url,
        "imageAlt": get_image_alt(item) if image_url else None,
        "placeholder": None if image_url else get_placeholder_style(item),
    }


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--json-logs/--console-logs",
    default=None,
    help="Log format (default from SEARCH_LOG_JSON).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool | None) -> None:
    """Faceted search aggregation preview."""
    settings = get_settings()
    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        json_format=settings.log_json if json_logs is None else json_logs,
    )
    ctx.with_resource(request_context(str(uuid.uuid4())))
    ctx.obj = SearchService(settings=settings)


@cli.command()
@click.option(
    "--sort",
    "sort_order",
    type=click.Choice(SORT_CHOICES),
    default=SortOrderKey.RELEVANCE.value,
    show_default=True,
    help="Sort order.",
)
@click.option("--query", "-q", "search_term", default=None, help="Search term.")
@click.option(
    "--semantic/--no-semantic",
    default=None,
    help="Bias ranking toward semantic similarity.",
)
@click.option("--weight", type=click.FloatRange(min=0.0), default=None)
@click.pass_obj
def plan(
    service: SearchService,
    sort_order: str,
    search_term: str | None,
    semantic: bool | None,
    weight: float | None,
) -> None:
    """Print the orderBy arguments for both content queries."""
    request = SearchRequest(
        search_term=search_term,
        sort_order=sort_order,
        use_semantic_search=semantic,
        semantic_weight=weight,
    )
    _echo_json(service.plan_queries(request).to_json_dict())


@cli.command()
@click.argument(
    "article_response", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument(
    "experience_response",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--sort",
    "sort_order",
    type=click.Choice(SORT_CHOICES),
    default=SortOrderKey.RELEVANCE.value,
    show_default=True,
    help="Sort order.",
)
@click.option("--domain", default=None, help="Base URL of the active site.")
@click.option(
    "--summary", is_flag=True, help="Print result cards instead of raw items."
)
@click.pass_obj
def merge(
    service: SearchService,
    article_response: Path,
    experience_response: Path,
    sort_order: str,
    domain: str | None,
    summary: bool,
) -> None:
    """Merge two saved query responses and print the search response.

    ARTICLE_RESPONSE and EXPERIENCE_RESPONSE are JSON files holding the
    ``items`` and ``facets`` of the ArticlePage and Experience queries.
    """
    request = SearchRequest(sort_order=sort_order, domain=domain)
    try:
        response = service.build_response(
            request,
            _load_response(article_response),
            _load_response(experience_response),
        )
    except PayloadShapeError as e:
        click.echo(f"Error: {e.message}", err=True)
        for error in e.errors:
            click.echo(f"  - {error}", err=True)
        sys.exit(1)

    data = response.to_json_dict()
    if summary:
        excerpt_length = service.settings.excerpt_length
        data["items"] = [_summarize(item, excerpt_length) for item in response.items]
    _echo_json(data)


if __name__ == "__main__":
    cli()
