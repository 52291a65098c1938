"""Faceted search result aggregation for a headless-CMS preview front end.

Merges the results of the ArticlePage and Experience content queries into
one ordered list with pinned "best bet" results first, merges their facet
counts, and resolves the per-query ordering before the queries run.
"""

from faceted_search.aggregator import (
    FacetAggregator,
    FacetEntry,
    FacetSummary,
    ResultAggregator,
)
from faceted_search.content import ContentType, SearchResultItem
from faceted_search.ordering import OrderingSpec, SortOrderKey, SortSpecResolver
from faceted_search.search import SearchRequest, SearchResponse, SearchService


__version__ = "0.1.0"

__all__ = [
    "ContentType",
    "FacetAggregator",
    "FacetEntry",
    "FacetSummary",
    "OrderingSpec",
    "ResultAggregator",
    "SearchRequest",
    "SearchResponse",
    "SearchResultItem",
    "SearchService",
    "SortOrderKey",
    "SortSpecResolver",
]
