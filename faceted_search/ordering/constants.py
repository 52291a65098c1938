"""Constants for the ordering module."""

from collections.abc import Mapping
from types import MappingProxyType

from faceted_search.ordering.models import (
    OrderingSpec,
    RankingMode,
    SortDirection,
    SortOrderKey,
)


# ArticlePage exposes a sortable Heading field
ARTICLE_PAGE_SORT_ORDERS: Mapping[SortOrderKey, OrderingSpec] = MappingProxyType(
    {
        SortOrderKey.RELEVANCE: OrderingSpec.rank(RankingMode.RELEVANCE),
        SortOrderKey.SEMANTIC: OrderingSpec.rank(RankingMode.SEMANTIC),
        SortOrderKey.DATE_DESC: OrderingSpec.by_field(
            "_metadata", "published", direction=SortDirection.DESC
        ),
        SortOrderKey.DATE_ASC: OrderingSpec.by_field(
            "_metadata", "published", direction=SortDirection.ASC
        ),
        SortOrderKey.TITLE_ASC: OrderingSpec.by_field(
            "Heading", direction=SortDirection.ASC
        ),
        SortOrderKey.TITLE_DESC: OrderingSpec.by_field(
            "Heading", direction=SortDirection.DESC
        ),
    }
)

# Experience has no Heading; titles sort on the metadata display name
EXPERIENCE_SORT_ORDERS: Mapping[SortOrderKey, OrderingSpec] = MappingProxyType(
    {
        SortOrderKey.RELEVANCE: OrderingSpec.rank(RankingMode.RELEVANCE),
        SortOrderKey.SEMANTIC: OrderingSpec.rank(RankingMode.SEMANTIC),
        SortOrderKey.DATE_DESC: OrderingSpec.by_field(
            "_metadata", "published", direction=SortDirection.DESC
        ),
        SortOrderKey.DATE_ASC: OrderingSpec.by_field(
            "_metadata", "published", direction=SortDirection.ASC
        ),
        SortOrderKey.TITLE_ASC: OrderingSpec.by_field(
            "_metadata", "displayName", direction=SortDirection.ASC
        ),
        SortOrderKey.TITLE_DESC: OrderingSpec.by_field(
            "_metadata", "displayName", direction=SortDirection.DESC
        ),
    }
)
