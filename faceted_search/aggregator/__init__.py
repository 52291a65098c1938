"""Result and facet aggregation across the two content queries.

Merges ArticlePage and Experience hits into one ordered result list with
pinned "best bet" results first, and merges the facet counts of both
queries into one summary.
"""

from faceted_search.aggregator.constants import PINNING_THRESHOLD
from faceted_search.aggregator.facets import FacetAggregator, merge_facets_pure
from faceted_search.aggregator.models import FacetEntry, FacetSummary
from faceted_search.aggregator.results import ResultAggregator, merge_results_pure


__all__ = [
    "PINNING_THRESHOLD",
    "FacetAggregator",
    "FacetEntry",
    "FacetSummary",
    "ResultAggregator",
    "merge_facets_pure",
    "merge_results_pure",
]
