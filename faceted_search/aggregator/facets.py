"""Merging of facet counts from both content queries."""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from faceted_search.aggregator.models import (
    FacetEntry,
    FacetSummary,
    RawFacet,
    RawFacetPayload,
)


logger = structlog.get_logger()

RawFacets = Mapping[str, Any] | RawFacetPayload | None


class FacetAggregator:
    """Builds one facet summary from the facets of both content queries.

    Author facets only exist on ArticlePage and are passed through entry
    by entry. Type facets exist on both and are summed by name, keeping
    the order in which names first appear (article facets first). Entries
    without a name are dropped; entries without a usable count contribute 0.
    """

    def __init__(self) -> None:
        """Initialize the aggregator."""
        self._log = logger.bind(component="aggregator", subcomponent="facets")

    def merge_facets(
        self, article_facets: RawFacets, experience_facets: RawFacets
    ) -> FacetSummary:
        """Merge the facet payloads of both queries.

        Args:
            article_facets: Facet block of the ArticlePage query.
            experience_facets: Facet block of the Experience query.

        Returns:
            FacetSummary with author and type facets.
        """
        article = self._parse(article_facets)
        experience = self._parse(experience_facets)

        authors = [
            FacetEntry(name=facet.name, count=facet.count)
            for facet in article.authors
            if facet.name
        ]
        types = self._sum_by_name([*article.types, *experience.types])

        self._log.debug(
            "facets_merged",
            author_count=len(authors),
            type_count=len(types),
        )
        return FacetSummary(authors=authors, types=types)

    @staticmethod
    def _sum_by_name(facets: Iterable[RawFacet]) -> list[FacetEntry]:
        """Sum counts of same-named facets in first-occurrence order."""
        counts: dict[str, int] = {}
        for facet in facets:
            if not facet.name:
                continue
            counts[facet.name] = counts.get(facet.name, 0) + facet.count
        return [FacetEntry(name=name, count=count) for name, count in counts.items()]

    def _parse(self, raw: RawFacets) -> RawFacetPayload:
        """Parse a facet block; absent or unreadable blocks are empty."""
        if raw is None:
            return RawFacetPayload()
        if isinstance(raw, RawFacetPayload):
            return raw
        try:
            return RawFacetPayload.model_validate(raw)
        except ValidationError:
            self._log.warning("malformed_facets_ignored", raw_type=type(raw).__name__)
            return RawFacetPayload()


def merge_facets_pure(
    article_facets: RawFacets, experience_facets: RawFacets
) -> FacetSummary:
    """Pure function API for facet merging.

    Args:
        article_facets: Facet block of the ArticlePage query.
        experience_facets: Facet block of the Experience query.

    Returns:
        FacetSummary with author and type facets.
    """
    return FacetAggregator().merge_facets(article_facets, experience_facets)
