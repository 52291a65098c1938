"""Data models for result and facet aggregation."""

from typing import Annotated

from pydantic import Field, WrapValidator

from faceted_search.aggregator.constants import (
    AUTHOR_FACET_KEY,
    METADATA_FACET_KEY,
    TYPE_FACET_KEY,
)
from faceted_search.data_model import (
    CmsModel,
    Count,
    OptionalStr,
    StrictBaseModel,
    none_on_error,
)


class FacetEntry(StrictBaseModel):
    """A facet value with the number of matching items.

    Attributes:
        name: Facet value, unique within its category.
        count: Number of matching items.
    """

    name: Annotated[str, Field(min_length=1)]
    count: Annotated[int, Field(ge=0)] = 0


class FacetSummary(StrictBaseModel):
    """Merged facets of both content queries.

    Attributes:
        authors: Author facets (ArticlePage only).
        types: Content type facets of both queries.
    """

    authors: list[FacetEntry] = Field(default_factory=list)
    types: list[FacetEntry] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, list[dict[str, str | int]]]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary with ``authors`` and ``types`` lists.
        """
        return {
            "authors": [entry.model_dump() for entry in self.authors],
            "types": [entry.model_dump() for entry in self.types],
        }


class RawFacet(CmsModel):
    """One facet value as returned by the CMS."""

    name: OptionalStr = None
    count: Count = 0


FacetList = Annotated[
    list[Annotated[RawFacet | None, WrapValidator(none_on_error)]] | None,
    WrapValidator(none_on_error),
]


class RawFacetMetadata(CmsModel):
    """The ``_metadata`` facet block."""

    types: FacetList = Field(default=None, alias=TYPE_FACET_KEY)


class RawFacetPayload(CmsModel):
    """Facet block of one content query.

    Attributes:
        author: Author facet values (ArticlePage only).
        metadata: Metadata facets, carrying the content type facet.
    """

    author: FacetList = Field(default=None, alias=AUTHOR_FACET_KEY)
    metadata: Annotated[RawFacetMetadata | None, WrapValidator(none_on_error)] = Field(
        default=None, alias=METADATA_FACET_KEY
    )

    @property
    def authors(self) -> list[RawFacet]:
        """Author facet values, skipping unreadable entries."""
        return [facet for facet in self.author or [] if facet is not None]

    @property
    def types(self) -> list[RawFacet]:
        """Type facet values, skipping unreadable entries."""
        if self.metadata is None:
            return []
        return [facet for facet in self.metadata.types or [] if facet is not None]
