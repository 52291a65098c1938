"""Sort-order resolution for the two content queries."""

from collections.abc import Mapping
from types import MappingProxyType

import structlog

from faceted_search.ordering.constants import (
    ARTICLE_PAGE_SORT_ORDERS,
    EXPERIENCE_SORT_ORDERS,
)
from faceted_search.ordering.models import OrderingSpec, SortOrderKey, SortSpecs
from faceted_search.ordering.semantic import apply_semantic_weight


logger = structlog.get_logger()


class SortSpecResolver:
    """Maps a sort-order key to one ordering spec per content variant.

    The two variants expose different sortable fields, so each has its own
    lookup table. Tables are copied into read-only mappings at
    construction and never change afterwards.
    """

    def __init__(
        self,
        article_sort_orders: Mapping[SortOrderKey, OrderingSpec] = (
            ARTICLE_PAGE_SORT_ORDERS
        ),
        experience_sort_orders: Mapping[SortOrderKey, OrderingSpec] = (
            EXPERIENCE_SORT_ORDERS
        ),
    ) -> None:
        """Initialize the resolver.

        Args:
            article_sort_orders: Lookup table for ArticlePage queries.
            experience_sort_orders: Lookup table for Experience queries.

        Raises:
            ValueError: If a table has no RELEVANCE entry to fall back to.
        """
        for name, table in (
            ("article_sort_orders", article_sort_orders),
            ("experience_sort_orders", experience_sort_orders),
        ):
            if SortOrderKey.RELEVANCE not in table:
                msg = f"{name} must define a '{SortOrderKey.RELEVANCE.value}' entry"
                raise ValueError(msg)

        self._article_sort_orders = MappingProxyType(dict(article_sort_orders))
        self._experience_sort_orders = MappingProxyType(dict(experience_sort_orders))
        self._log = logger.bind(component="ordering", subcomponent="resolver")

    def resolve(self, sort_key: SortOrderKey | str | None) -> SortSpecs:
        """Resolve the ordering specs for a sort key.

        Unknown keys silently fall back to relevance ranking.

        Args:
            sort_key: Requested sort order.

        Returns:
            SortSpecs for the ArticlePage and Experience queries.
        """
        key = SortOrderKey.normalize(sort_key)
        if sort_key is not None and key.value != getattr(sort_key, "value", sort_key):
            self._log.debug(
                "sort_key_normalized",
                requested=str(sort_key),
                resolved=key.value,
            )

        return SortSpecs(
            article_spec=self._lookup(self._article_sort_orders, key),
            experience_spec=self._lookup(self._experience_sort_orders, key),
        )

    def resolve_weighted(
        self,
        sort_key: SortOrderKey | str | None,
        search_term: str | None,
        use_semantic_search: bool,
        semantic_weight: float,
    ) -> SortSpecs:
        """Resolve ordering specs and apply the semantic weight to each.

        Args:
            sort_key: Requested sort order.
            search_term: Free-text query of the request.
            use_semantic_search: Whether semantic search is enabled.
            semantic_weight: Weight to attach when it applies.

        Returns:
            SortSpecs actually sent with the two content queries.
        """
        specs = self.resolve(sort_key)
        return SortSpecs(
            article_spec=apply_semantic_weight(
                specs.article_spec, search_term, use_semantic_search, semantic_weight
            ),
            experience_spec=apply_semantic_weight(
                specs.experience_spec,
                search_term,
                use_semantic_search,
                semantic_weight,
            ),
        )

    @staticmethod
    def _lookup(
        table: Mapping[SortOrderKey, OrderingSpec], key: SortOrderKey
    ) -> OrderingSpec:
        """Look up a key, falling back to the table's relevance entry."""
        spec = table.get(key)
        if spec is None:
            return table[SortOrderKey.RELEVANCE]
        return spec


def resolve_sort_specs_pure(
    sort_key: SortOrderKey | str | None,
    search_term: str | None = None,
    use_semantic_search: bool = False,
    semantic_weight: float = 0.0,
) -> SortSpecs:
    """Pure function API for sort-order resolution with the default tables.

    Args:
        sort_key: Requested sort order.
        search_term: Free-text query of the request.
        use_semantic_search: Whether semantic search is enabled.
        semantic_weight: Weight to attach when it applies.

    Returns:
        SortSpecs for both content queries.
    """
    return SortSpecResolver().resolve_weighted(
        sort_key, search_term, use_semantic_search, semantic_weight
    )
