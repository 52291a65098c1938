"""Shared Pydantic base models."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model with strict, immutable defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class CmsModel(BaseModel):
    """Base model for CMS payload shapes.

    Payloads carry fields this library never reads (``__typename`` and
    friends), so unknown keys are ignored. Fields are populated by their
    CMS alias or by their Python name.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
