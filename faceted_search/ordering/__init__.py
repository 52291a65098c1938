"""Sort-order resolution for the ArticlePage and Experience queries.

Resolves a request's sort key into one ordering spec per content variant
and optionally biases relevance ranking with a semantic weight. The specs
are handed to the query layer before the content queries run.
"""

from faceted_search.ordering.models import (
    OrderingSpec,
    RankingMode,
    SortDirection,
    SortOrderKey,
    SortSpecs,
)
from faceted_search.ordering.resolver import SortSpecResolver, resolve_sort_specs_pure
from faceted_search.ordering.semantic import apply_semantic_weight


__all__ = [
    "OrderingSpec",
    "RankingMode",
    "SortDirection",
    "SortOrderKey",
    "SortSpecResolver",
    "SortSpecs",
    "apply_semantic_weight",
    "resolve_sort_specs_pure",
]
