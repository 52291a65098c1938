"""Shared Pydantic base models and lenient field types."""

from faceted_search.data_model.base import CmsModel, StrictBaseModel
from faceted_search.data_model.lenient import (
    Count,
    OptionalStr,
    Score,
    none_on_error,
    zero_on_error,
)


__all__ = [
    "CmsModel",
    "Count",
    "OptionalStr",
    "Score",
    "StrictBaseModel",
    "none_on_error",
    "zero_on_error",
]
