"""Request and response models of the search service."""

import math
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import Field, model_validator

from faceted_search.aggregator.models import FacetSummary
from faceted_search.content.models import SearchResultItem
from faceted_search.data_model import StrictBaseModel
from faceted_search.ordering import OrderingSpec, SortOrderKey


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_flag(value: str | None) -> bool | None:
    """Parse a boolean query parameter; unrecognized values read as unset."""
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


def _parse_weight(value: str | None) -> float | None:
    """Parse a non-negative weight parameter; anything else reads as unset."""
    if value is None:
        return None
    try:
        weight = float(value)
    except ValueError:
        return None
    if math.isnan(weight) or weight < 0:
        return None
    return weight


class SearchRequest(StrictBaseModel):
    """Parameters of one faceted search request.

    Unset values fall back to the service settings.

    Attributes:
        search_term: Free-text query.
        sort_order: Requested sort order, normalized to a known key.
        sort_order_normalized: Whether an unknown sort order was replaced.
        use_semantic_search: Whether to bias ranking semantically.
        semantic_weight: Semantic bias weight.
        domain: Base URL of the active site.
    """

    search_term: str | None = None
    sort_order: SortOrderKey = SortOrderKey.RELEVANCE
    sort_order_normalized: bool = False
    use_semantic_search: bool | None = None
    semantic_weight: Annotated[float, Field(ge=0.0)] | None = None
    domain: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_sort_order(cls, data: Any) -> Any:
        """Replace unknown sort orders with relevance instead of failing."""
        if not isinstance(data, Mapping) or "sort_order" not in data:
            return data
        raw = data["sort_order"]
        key = SortOrderKey.normalize(raw)
        requested = getattr(raw, "value", raw)
        return {
            **data,
            "sort_order": key,
            "sort_order_normalized": bool(requested) and key.value != requested,
        }

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "SearchRequest":
        """Build a request from URL query parameters.

        Reads ``q``, ``sort``, ``semantic``, ``weight`` and ``domain``.
        Unreadable values are treated as unset.

        Args:
            params: Query string parameters.

        Returns:
            SearchRequest for the parameters.
        """
        search_term = params.get("q")
        return cls(
            search_term=search_term.strip() if search_term else None,
            sort_order=params.get("sort"),
            use_semantic_search=_parse_flag(params.get("semantic")),
            semantic_weight=_parse_weight(params.get("weight")),
            domain=params.get("domain") or None,
        )


class QueryPlan(StrictBaseModel):
    """Ordering specs to send with the two content queries.

    Attributes:
        sort_order: Resolved sort order.
        article_spec: Spec for the ArticlePage query.
        experience_spec: Spec for the Experience query.
    """

    sort_order: SortOrderKey
    article_spec: OrderingSpec
    experience_spec: OrderingSpec

    def to_json_dict(self) -> dict[str, Any]:
        """Convert to the ``orderBy`` arguments of both queries.

        Returns:
            Dictionary with the sort order and both ``orderBy`` values.
        """
        return {
            "sortOrder": self.sort_order.value,
            "articlePageOrderBy": self.article_spec.to_order_by(),
            "experienceOrderBy": self.experience_spec.to_order_by(),
        }


class SearchResponse(StrictBaseModel):
    """Aggregated result of one faceted search request.

    Attributes:
        items: Pinned results followed by the remaining results.
        facets: Merged facet summary.
        total: Number of results.
        pinned_count: Number of leading pinned results.
        sort_order: Sort order applied.
    """

    items: list[SearchResultItem] = Field(default_factory=list)
    facets: FacetSummary = Field(default_factory=FacetSummary)
    total: Annotated[int, Field(ge=0)] = 0
    pinned_count: Annotated[int, Field(ge=0)] = 0
    sort_order: SortOrderKey = SortOrderKey.RELEVANCE

    def to_json_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary in the shape consumed by the rendering layer.
        """
        return {
            "items": [item.to_json_dict() for item in self.items],
            "facets": self.facets.to_json_dict(),
            "total": self.total,
            "pinnedCount": self.pinned_count,
            "sortOrder": self.sort_order.value,
        }
