"""Unit tests for ordering models."""

import pytest
from pydantic import ValidationError

from faceted_search.ordering import (
    OrderingSpec,
    RankingMode,
    SortDirection,
    SortOrderKey,
)


class TestSortOrderKey:
    """Tests for sort key normalization."""

    @pytest.mark.parametrize("key", list(SortOrderKey))
    def test_known_keys_kept(self, key: SortOrderKey) -> None:
        assert SortOrderKey.normalize(key.value) is key
        assert SortOrderKey.normalize(key) is key

    @pytest.mark.parametrize("value", [None, "", "popularity", "DATE_DESC"])
    def test_unknown_keys_become_relevance(self, value: str | None) -> None:
        """Unknown, missing and differently cased keys fall back to relevance."""
        assert SortOrderKey.normalize(value) is SortOrderKey.RELEVANCE


class TestOrderingSpec:
    """Tests for OrderingSpec construction and serialization."""

    def test_ranking_order_by(self) -> None:
        spec = OrderingSpec.rank(RankingMode.RELEVANCE)
        assert spec.to_order_by() == {"_ranking": "RELEVANCE"}

    def test_nested_field_order_by(self) -> None:
        spec = OrderingSpec.by_field(
            "_metadata", "published", direction=SortDirection.DESC
        )
        assert spec.to_order_by() == {"_metadata": {"published": "DESC"}}

    def test_top_level_field_order_by(self) -> None:
        spec = OrderingSpec.by_field("Heading", direction=SortDirection.ASC)
        assert spec.to_order_by() == {"Heading": "ASC"}

    def test_semantic_weight_included(self) -> None:
        spec = OrderingSpec(ranking=RankingMode.RELEVANCE, semantic_weight=0.5)
        assert spec.to_order_by() == {"_ranking": "RELEVANCE", "_semanticWeight": 0.5}

    def test_is_semantic_ranking(self) -> None:
        assert OrderingSpec.rank(RankingMode.SEMANTIC).is_semantic_ranking
        assert not OrderingSpec.rank(RankingMode.RELEVANCE).is_semantic_ranking

    def test_rejects_empty_spec(self) -> None:
        with pytest.raises(ValidationError, match="field_path and direction"):
            OrderingSpec()

    def test_rejects_field_without_direction(self) -> None:
        with pytest.raises(ValidationError):
            OrderingSpec(field_path=("Heading",))

    def test_rejects_ranking_with_field(self) -> None:
        with pytest.raises(ValidationError, match="cannot also order"):
            OrderingSpec(
                ranking=RankingMode.RELEVANCE,
                field_path=("Heading",),
                direction=SortDirection.ASC,
            )
