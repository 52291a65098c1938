"""Faceted search request orchestration."""

from collections.abc import Mapping
from typing import Any

import structlog

from faceted_search.aggregator import FacetAggregator, ResultAggregator
from faceted_search.content.models import ContentType
from faceted_search.ordering import SortSpecResolver
from faceted_search.search.errors import PayloadShapeError
from faceted_search.search.metrics import SearchMetrics
from faceted_search.search.models import QueryPlan, SearchRequest, SearchResponse
from faceted_search.search.validation import FACETS_KEY, ITEMS_KEY, validate_response
from faceted_search.settings import SearchSettings


logger = structlog.get_logger()

QueryResponse = Mapping[str, Any] | None


class SearchService:
    """Runs the aggregation core for one search request at a time.

    Request flow:
        plan_queries (before the content queries run) ->
        build_response (after both responses are in)

    The service holds no per-request state; one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        settings: SearchSettings | None = None,
        resolver: SortSpecResolver | None = None,
        aggregator: ResultAggregator | None = None,
        facet_aggregator: FacetAggregator | None = None,
        metrics: SearchMetrics | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            settings: Defaults for values a request leaves unset.
            resolver: Sort-order resolver.
            aggregator: Result aggregator.
            facet_aggregator: Facet aggregator.
            metrics: Optional metrics instance.
        """
        self._settings = settings or SearchSettings()
        self._resolver = resolver or SortSpecResolver()
        self._aggregator = aggregator or ResultAggregator()
        self._facet_aggregator = facet_aggregator or FacetAggregator()
        self._metrics = metrics or SearchMetrics.get_instance()
        self._log = logger.bind(component="search", subcomponent="service")

    @property
    def settings(self) -> SearchSettings:
        """Defaults applied to unset request values."""
        return self._settings

    def plan_queries(self, request: SearchRequest) -> QueryPlan:
        """Resolve the ordering specs for both content queries.

        Args:
            request: Search request.

        Returns:
            QueryPlan with one ordering spec per content query.
        """
        use_semantic = self._use_semantic(request)
        weight = self._semantic_weight(request)
        specs = self._resolver.resolve_weighted(
            request.sort_order, request.search_term, use_semantic, weight
        )

        self._log.debug(
            "queries_planned",
            sort_order=request.sort_order.value,
            use_semantic_search=use_semantic,
            semantic_weight=specs.article_spec.semantic_weight,
        )
        return QueryPlan(
            sort_order=request.sort_order,
            article_spec=specs.article_spec,
            experience_spec=specs.experience_spec,
        )

    def build_response(
        self,
        request: SearchRequest,
        article_response: QueryResponse,
        experience_response: QueryResponse,
    ) -> SearchResponse:
        """Aggregate both query responses into one search response.

        Args:
            request: Search request the responses were fetched for.
            article_response: ArticlePage query response.
            experience_response: Experience query response.

        Returns:
            SearchResponse with merged items and facets.

        Raises:
            PayloadShapeError: If a response envelope is malformed.
        """
        self._validate(article_response, ContentType.ARTICLE_PAGE.value)
        self._validate(experience_response, ContentType.EXPERIENCE.value)

        article_response = article_response or {}
        experience_response = experience_response or {}
        article_items = article_response.get(ITEMS_KEY) or []
        experience_items = experience_response.get(ITEMS_KEY) or []
        domain = self._domain(request)

        items = self._aggregator.merge(
            article_items, experience_items, request.sort_order, domain
        )
        facets = self._facet_aggregator.merge_facets(
            article_response.get(FACETS_KEY), experience_response.get(FACETS_KEY)
        )

        pinned_count = sum(
            1 for item in items if self._aggregator.is_pinned(item, domain)
        )
        cross_domain = sum(
            1 for item in items if self._aggregator.is_cross_domain_pin(item, domain)
        )
        self._record_metrics(request, len(article_items), len(experience_items))
        self._metrics.record_pins(pinned_count, cross_domain)

        self._log.info(
            "search_response_built",
            sort_order=request.sort_order.value,
            article_items=len(article_items),
            experience_items=len(experience_items),
            pinned_count=pinned_count,
            cross_domain_pins=cross_domain,
            type_facets=len(facets.types),
        )
        return SearchResponse(
            items=items,
            facets=facets,
            total=len(items),
            pinned_count=pinned_count,
            sort_order=request.sort_order,
        )

    def _validate(self, response: QueryResponse, source: str) -> None:
        """Reject a response whose envelope the aggregators cannot read."""
        result = validate_response(response, source)
        if result.valid:
            return
        self._metrics.record_malformed_payload()
        self._log.error(
            "payload_validation_failed", source=source, errors=result.errors
        )
        raise PayloadShapeError(source, result.errors)

    def _record_metrics(
        self, request: SearchRequest, article_count: int, experience_count: int
    ) -> None:
        """Record request and item counts."""
        self._metrics.record_request(
            request.sort_order.value, request.sort_order_normalized
        )
        self._metrics.record_items(ContentType.ARTICLE_PAGE.value, article_count)
        self._metrics.record_items(ContentType.EXPERIENCE.value, experience_count)

    def _use_semantic(self, request: SearchRequest) -> bool:
        if request.use_semantic_search is None:
            return self._settings.use_semantic_search
        return request.use_semantic_search

    def _semantic_weight(self, request: SearchRequest) -> float:
        if request.semantic_weight is None:
            return self._settings.semantic_weight
        return request.semantic_weight

    def _domain(self, request: SearchRequest) -> str:
        return request.domain or self._settings.site_domain


def plan_queries_pure(
    request: SearchRequest, settings: SearchSettings | None = None
) -> QueryPlan:
    """Pure function API for query planning.

    Args:
        request: Search request.
        settings: Defaults for unset request values.

    Returns:
        QueryPlan for both content queries.
    """
    return SearchService(settings=settings, metrics=SearchMetrics()).plan_queries(
        request
    )


def build_response_pure(
    request: SearchRequest,
    article_response: QueryResponse,
    experience_response: QueryResponse,
    settings: SearchSettings | None = None,
) -> SearchResponse:
    """Pure function API for response aggregation.

    Uses a throwaway metrics instance so the shared one is left untouched.

    Args:
        request: Search request.
        article_response: ArticlePage query response.
        experience_response: Experience query response.
        settings: Defaults for unset request values.

    Returns:
        SearchResponse with merged items and facets.

    Raises:
        PayloadShapeError: If a response envelope is malformed.
    """
    service = SearchService(settings=settings, metrics=SearchMetrics())
    return service.build_response(request, article_response, experience_response)
