"""Merging of ArticlePage and Experience results into one ordered list."""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from faceted_search.aggregator.comparators import sort_results
from faceted_search.aggregator.constants import PINNING_THRESHOLD
from faceted_search.content.models import (
    VARIANT_MODELS,
    ContentBase,
    ContentType,
    SearchResultItem,
)
from faceted_search.ordering import SortOrderKey


logger = structlog.get_logger()

RawItem = Mapping[str, Any] | BaseModel


class ResultAggregator:
    """Tags, merges, sorts and pin-promotes results of both content queries.

    Merge flow:
        tag -> concatenate (articles first) -> client sort -> partition
        pinned/rest -> pinned by descending score -> pinned + rest

    A pinned result ("best bet") scores at least the pinning threshold and
    has a url base equal to the active domain. High scores on other domains stay in
    the regular results and follow the requested order.

    Merging never fails: malformed fields read as neutral defaults and
    every input item appears exactly once in the output.
    """

    def __init__(self, pinning_threshold: float = PINNING_THRESHOLD) -> None:
        """Initialize the aggregator.

        Args:
            pinning_threshold: Minimum score of a pinned result.
        """
        self._pinning_threshold = pinning_threshold
        self._log = logger.bind(component="aggregator", subcomponent="results")

    @property
    def pinning_threshold(self) -> float:
        """Minimum score of a pinned result."""
        return self._pinning_threshold

    def merge(
        self,
        article_items: Iterable[RawItem] | None,
        experience_items: Iterable[RawItem] | None,
        sort_key: SortOrderKey | str | None,
        domain: str,
    ) -> list[SearchResultItem]:
        """Merge both result sets into one ordered sequence.

        Args:
            article_items: Raw ArticlePage hits in source order.
            experience_items: Raw Experience hits in source order.
            sort_key: Requested sort order.
            domain: Base URL of the active site, used to scope pins.

        Returns:
            Pinned results followed by the remaining results.
        """
        key = SortOrderKey.normalize(sort_key)

        items = self.tag(article_items or (), ContentType.ARTICLE_PAGE) + self.tag(
            experience_items or (), ContentType.EXPERIENCE
        )
        ordered = sort_results(items, key)
        pinned, rest = self.partition(ordered, domain)
        pinned = sorted(pinned, key=lambda item: item.score, reverse=True)

        self._log.debug(
            "results_merged",
            sort_key=key.value,
            items_total=len(items),
            pinned_count=len(pinned),
        )
        return pinned + rest

    def tag(
        self, raw_items: Iterable[RawItem], content_type: ContentType
    ) -> list[SearchResultItem]:
        """Parse raw hits of one query and tag them with their content type.

        Args:
            raw_items: Raw hits in source order.
            content_type: Content type of the query they came from.

        Returns:
            Tagged results in source order.
        """
        return [
            SearchResultItem(
                content_type=content_type,
                content=self._parse(raw, content_type),
            )
            for raw in raw_items
        ]

    def is_pinned(self, item: SearchResultItem, domain: str) -> bool:
        """Check whether a result is pinned on the given domain.

        Args:
            item: Tagged result.
            domain: Base URL of the active site.

        Returns:
            True for high-scoring results of the active domain.
        """
        return item.score >= self._pinning_threshold and item.url_base == domain

    def is_cross_domain_pin(self, item: SearchResultItem, domain: str) -> bool:
        """Check whether a result is pinned for a different domain.

        Args:
            item: Tagged result.
            domain: Base URL of the active site.

        Returns:
            True for high-scoring results that are not pinned on ``domain``.
        """
        return item.score >= self._pinning_threshold and not self.is_pinned(
            item, domain
        )

    def partition(
        self, items: list[SearchResultItem], domain: str
    ) -> tuple[list[SearchResultItem], list[SearchResultItem]]:
        """Split results into pinned and regular results.

        Args:
            items: Ordered results.
            domain: Base URL of the active site.

        Returns:
            Tuple of (pinned, rest), each keeping the input order.
        """
        pinned: list[SearchResultItem] = []
        rest: list[SearchResultItem] = []
        for item in items:
            if self.is_pinned(item, domain):
                pinned.append(item)
            else:
                rest.append(item)
        return pinned, rest

    def _parse(self, raw: RawItem, content_type: ContentType) -> ContentBase:
        """Parse one raw hit into its variant model.

        A hit that is not even a mapping becomes an empty variant so that
        it still takes its place in the results.
        """
        model = VARIANT_MODELS[content_type]
        if isinstance(raw, model):
            return raw
        if isinstance(raw, BaseModel):
            raw = raw.model_dump(by_alias=True)
        try:
            return model.model_validate(raw)
        except ValidationError:
            self._log.warning(
                "malformed_item_replaced",
                content_type=content_type.value,
                raw_type=type(raw).__name__,
            )
            return model()


def merge_results_pure(
    article_items: Iterable[RawItem],
    experience_items: Iterable[RawItem],
    sort_key: SortOrderKey | str | None,
    domain: str,
) -> list[SearchResultItem]:
    """Pure function API for result merging.

    Args:
        article_items: Raw ArticlePage hits.
        experience_items: Raw Experience hits.
        sort_key: Requested sort order.
        domain: Base URL of the active site.

    Returns:
        Pinned results followed by the remaining results.
    """
    return ResultAggregator().merge(article_items, experience_items, sort_key, domain)
