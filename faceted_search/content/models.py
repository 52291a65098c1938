"""Data models for the two CMS content variants.

Query results arrive as loosely shaped JSON. Each variant is modelled
explicitly here, with every field optional and lenient: a field whose
value has the wrong shape is read as ``None`` (or ``0.0`` for scores)
instead of failing the whole item. Missing data degrades one field, never
the result page.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import Field, WrapValidator, model_validator

from faceted_search.data_model import (
    CmsModel,
    OptionalStr,
    Score,
    StrictBaseModel,
    none_on_error,
)


class ContentType(str, Enum):
    """Discriminator tag attached to every merged search result."""

    ARTICLE_PAGE = "ArticlePage"
    EXPERIENCE = "Experience"


class ContentUrl(CmsModel):
    """URL of a content item or content reference.

    Attributes:
        base: Site base URL the content belongs to.
        default: Default (absolute or site-relative) URL.
    """

    base: OptionalStr = None
    default: OptionalStr = None


class ItemMetadata(CmsModel):
    """The ``_metadata`` block shared by all content.

    Attributes:
        display_name: Editor-facing display name.
        published: Published timestamp as sent by the CMS.
        url: Canonical URL of the item.
    """

    display_name: OptionalStr = Field(default=None, alias="displayName")
    published: OptionalStr = None
    url: Annotated[ContentUrl | None, WrapValidator(none_on_error)] = None


class ImageAsset(CmsModel):
    """DAM asset resolved behind an image reference."""

    url: OptionalStr = Field(default=None, alias="Url")
    alt_text: OptionalStr = Field(default=None, alias="AltText")
    metadata: Annotated[ItemMetadata | None, WrapValidator(none_on_error)] = Field(
        default=None, alias="_metadata"
    )


class ImageReference(CmsModel):
    """Image field value.

    The CMS returns either a content reference (``url.default``) or a DAM
    asset (``item.Url``), sometimes both.
    """

    url: Annotated[ContentUrl | None, WrapValidator(none_on_error)] = None
    item: Annotated[ImageAsset | None, WrapValidator(none_on_error)] = None


class RichText(CmsModel):
    """Rich text field rendered as HTML."""

    html: OptionalStr = None


class SeoSettings(CmsModel):
    """SEO block of an Experience."""

    meta_title: OptionalStr = Field(default=None, alias="MetaTitle")
    meta_description: OptionalStr = Field(default=None, alias="MetaDescription")
    sharing_image: Annotated[ImageReference | None, WrapValidator(none_on_error)] = (
        Field(default=None, alias="SharingImage")
    )


class ContentBase(CmsModel):
    """Fields common to both content variants.

    Attributes:
        score: Relevance score reported by the search index.
        metadata: Shared ``_metadata`` block.
    """

    score: Score = Field(default=0.0, alias="_score")
    metadata: Annotated[ItemMetadata | None, WrapValidator(none_on_error)] = Field(
        default=None, alias="_metadata"
    )

    @property
    def display_name(self) -> str | None:
        """Metadata display name, if any."""
        return self.metadata.display_name if self.metadata else None

    @property
    def published(self) -> str | None:
        """Raw published timestamp, if any."""
        return self.metadata.published if self.metadata else None

    @property
    def url_base(self) -> str | None:
        """Base URL of the site the item belongs to, if any."""
        if self.metadata is None or self.metadata.url is None:
            return None
        return self.metadata.url.base


class ArticlePage(ContentBase):
    """ArticlePage search hit.

    Attributes:
        heading: Article heading (sortable title field).
        body: Article body.
        promo_image: Teaser image.
    """

    heading: OptionalStr = Field(default=None, alias="Heading")
    body: Annotated[RichText | None, WrapValidator(none_on_error)] = Field(
        default=None, alias="Body"
    )
    promo_image: Annotated[ImageReference | None, WrapValidator(none_on_error)] = (
        Field(default=None, alias="PromoImage")
    )


class Experience(ContentBase):
    """Experience (composed page) search hit.

    Experiences have no heading field; their title lives in the SEO block
    or falls back to the metadata display name.

    Attributes:
        seo_settings: SEO block with title, description and sharing image.
        fulltext: Indexed full text, usually a list of text fragments.
    """

    seo_settings: Annotated[SeoSettings | None, WrapValidator(none_on_error)] = (
        Field(default=None, alias="BlankExperienceSeoSettings")
    )
    fulltext: Annotated[
        list[OptionalStr] | str | None, WrapValidator(none_on_error)
    ] = Field(default=None, alias="_fulltext")


ContentVariant = ArticlePage | Experience

VARIANT_MODELS: dict[ContentType, type[ContentBase]] = {
    ContentType.ARTICLE_PAGE: ArticlePage,
    ContentType.EXPERIENCE: Experience,
}


class SearchResultItem(StrictBaseModel):
    """A content variant tagged with its content type.

    Attributes:
        content_type: Discriminator assigned at merge time.
        content: The parsed variant.
    """

    content_type: ContentType
    content: ArticlePage | Experience

    @model_validator(mode="after")
    def validate_tag_matches_content(self) -> "SearchResultItem":
        """Ensure the tag names the class of the content it carries."""
        expected = VARIANT_MODELS[self.content_type]
        if type(self.content) is not expected:
            msg = (
                f"content_type {self.content_type.value} does not match "
                f"{type(self.content).__name__} content"
            )
            raise ValueError(msg)
        return self

    @property
    def score(self) -> float:
        """Relevance score of the underlying content."""
        return self.content.score

    @property
    def url_base(self) -> str | None:
        """Base URL of the underlying content."""
        return self.content.url_base

    def to_json_dict(self) -> dict[str, Any]:
        """Convert to the CMS-shaped dict consumed by the rendering layer.

        Returns:
            The content in its CMS field names plus a ``__contentType`` tag.
        """
        data: dict[str, Any] = self.content.model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        data["__contentType"] = self.content_type.value
        return data
