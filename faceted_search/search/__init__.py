"""Faceted search service.

Ties the aggregation core to a request: plans the ordering of both
content queries, validates their responses and aggregates them.
"""

from faceted_search.search.errors import (
    ErrorCode,
    FacetedSearchError,
    PayloadShapeError,
)
from faceted_search.search.metrics import SearchMetrics
from faceted_search.search.models import QueryPlan, SearchRequest, SearchResponse
from faceted_search.search.service import (
    SearchService,
    build_response_pure,
    plan_queries_pure,
)
from faceted_search.search.validation import ValidationResult, validate_response


__all__ = [
    "ErrorCode",
    "FacetedSearchError",
    "PayloadShapeError",
    "QueryPlan",
    "SearchMetrics",
    "SearchRequest",
    "SearchResponse",
    "SearchService",
    "ValidationResult",
    "build_response_pure",
    "plan_queries_pure",
    "validate_response",
]
