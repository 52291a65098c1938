"""Data models for sort-order resolution."""

from enum import Enum
from typing import Any

from pydantic import model_validator

from faceted_search.data_model import StrictBaseModel


class SortOrderKey(str, Enum):
    """Sort orders a search request may ask for."""

    RELEVANCE = "relevance"
    SEMANTIC = "semantic"
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    TITLE_ASC = "title_asc"
    TITLE_DESC = "title_desc"

    @classmethod
    def normalize(cls, value: "str | SortOrderKey | None") -> "SortOrderKey":
        """Map any incoming value onto a known key.

        Unknown or missing values become RELEVANCE; this is never an error.

        Args:
            value: Raw sort parameter.

        Returns:
            The matching SortOrderKey.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RELEVANCE


class RankingMode(str, Enum):
    """Server-side ranking modes of the search index."""

    RELEVANCE = "RELEVANCE"
    SEMANTIC = "SEMANTIC"


class SortDirection(str, Enum):
    """Field sort direction."""

    ASC = "ASC"
    DESC = "DESC"


class OrderingSpec(StrictBaseModel):
    """Ordering directive sent with one content query.

    Exactly one of ``ranking`` or ``field_path`` + ``direction`` is set.

    Attributes:
        ranking: Server-side ranking mode.
        field_path: Path of the sort field, e.g. ("_metadata", "published").
        direction: Direction for field ordering.
        semantic_weight: Optional bias toward semantic similarity.
    """

    ranking: RankingMode | None = None
    field_path: tuple[str, ...] = ()
    direction: SortDirection | None = None
    semantic_weight: float | None = None

    @model_validator(mode="after")
    def validate_single_directive(self) -> "OrderingSpec":
        """Ensure the spec is either a ranking or a field ordering."""
        if self.ranking is not None:
            if self.field_path or self.direction is not None:
                msg = "Ranking specs cannot also order by a field"
                raise ValueError(msg)
        elif not self.field_path or self.direction is None:
            msg = "Field specs need both field_path and direction"
            raise ValueError(msg)
        return self

    @classmethod
    def rank(cls, mode: RankingMode) -> "OrderingSpec":
        """Create a ranking spec."""
        return cls(ranking=mode)

    @classmethod
    def by_field(cls, *path: str, direction: SortDirection) -> "OrderingSpec":
        """Create a field ordering spec."""
        return cls(field_path=path, direction=direction)

    @property
    def is_semantic_ranking(self) -> bool:
        """Whether this spec is a pure semantic ranking."""
        return self.ranking == RankingMode.SEMANTIC

    def to_order_by(self) -> dict[str, Any]:
        """Convert to the ``orderBy`` argument of a content query.

        Returns:
            e.g. {"_ranking": "RELEVANCE", "_semanticWeight": 0.5} or
            {"_metadata": {"published": "DESC"}}.
        """
        if self.ranking is not None:
            order_by: dict[str, Any] = {"_ranking": self.ranking.value}
        else:
            # Validator guarantees direction is set for field specs
            value: Any = self.direction.value  # type: ignore[union-attr]
            for key in reversed(self.field_path[1:]):
                value = {key: value}
            order_by = {self.field_path[0]: value}

        if self.semantic_weight is not None:
            order_by["_semanticWeight"] = self.semantic_weight
        return order_by


class SortSpecs(StrictBaseModel):
    """Ordering specs for both content queries of one request.

    Attributes:
        article_spec: Spec for the ArticlePage query.
        experience_spec: Spec for the Experience query.
    """

    article_spec: OrderingSpec
    experience_spec: OrderingSpec
