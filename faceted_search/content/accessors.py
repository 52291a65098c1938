"""Uniform read access to heterogeneous search results.

Every accessor dispatches on the item's content type and walks the
variant-specific fallback chain, so the rendering layer never has to know
which of the two content shapes it is looking at.
"""

import re
from datetime import datetime

from dateutil import parser as date_parser

from faceted_search.content.constants import (
    DEFAULT_EXCERPT_LENGTH,
    PLACEHOLDER_GRADIENTS,
    TRUNCATION_SUFFIX,
    UNTITLED,
)
from faceted_search.content.models import (
    ArticlePage,
    ContentType,
    Experience,
    ImageReference,
    SearchResultItem,
)


_MARKUP_TAG = re.compile(r"<[^>]*>")

# Components missing from a free-form timestamp are taken from here
_PARSE_DEFAULT = datetime(1970, 1, 1)

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def is_experience(item: SearchResultItem) -> bool:
    """Check whether a result is an Experience."""
    return item.content_type == ContentType.EXPERIENCE


def strip_markup(html: str | None, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Strip markup tags and truncate to max_length characters.

    Args:
        html: HTML (or plain) text; None reads as empty.
        max_length: Maximum number of characters kept.

    Returns:
        Plain text, with TRUNCATION_SUFFIX appended if it was cut.
    """
    text = _MARKUP_TAG.sub("", html or "")
    if len(text) > max_length:
        return text[:max_length] + TRUNCATION_SUFFIX
    return text


def get_title(item: SearchResultItem) -> str:
    """Get the display title of a result.

    ArticlePage: Heading, then display name. Experience: SEO meta title,
    then display name. Both fall back to UNTITLED.
    """
    content = item.content
    if isinstance(content, Experience):
        seo = content.seo_settings
        meta_title = seo.meta_title if seo else None
        return meta_title or content.display_name or UNTITLED
    return content.heading or content.display_name or UNTITLED


def get_excerpt(
    item: SearchResultItem, max_length: int = DEFAULT_EXCERPT_LENGTH
) -> str:
    """Get a plain-text excerpt of a result.

    Experience SEO descriptions are editor-authored and returned verbatim;
    every other source goes through strip_markup.

    Args:
        item: Search result.
        max_length: Maximum excerpt length before truncation.

    Returns:
        Excerpt text, empty when the item has no usable text.
    """
    content = item.content
    if isinstance(content, Experience):
        seo = content.seo_settings
        if seo and seo.meta_description:
            return seo.meta_description
        fulltext = content.fulltext
        if isinstance(fulltext, list):
            fulltext = " ".join(part for part in fulltext if part is not None)
        return strip_markup(fulltext, max_length)

    if content.body and content.body.html:
        return strip_markup(content.body.html, max_length)
    return ""


def _image_of(item: SearchResultItem) -> ImageReference | None:
    """Select the image reference used for a result's thumbnail."""
    content = item.content
    if isinstance(content, Experience):
        return content.seo_settings.sharing_image if content.seo_settings else None
    if isinstance(content, ArticlePage):
        return content.promo_image
    return None


def get_image_url(item: SearchResultItem) -> str | None:
    """Get the thumbnail URL of a result.

    Content reference URLs win over DAM asset URLs.

    Returns:
        Image URL, or None when the item has no image.
    """
    image = _image_of(item)
    if image is None:
        return None
    if image.url and image.url.default:
        return image.url.default
    if image.item and image.item.url:
        return image.item.url
    return None


def get_image_alt(item: SearchResultItem) -> str:
    """Get alt text for the thumbnail of a result.

    Falls back from the asset alt text to the asset display name and then
    to the result title.
    """
    image = _image_of(item)
    asset = image.item if image else None
    if asset is not None:
        if asset.alt_text:
            return asset.alt_text
        if asset.metadata and asset.metadata.display_name:
            return asset.metadata.display_name
    return get_title(item)


def _title_hash(title: str) -> int:
    """Compute a signed 32-bit rolling hash over UTF-16 code units."""
    encoded = title.encode("utf-16-le")
    value = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        value = (value * 31 + code_unit) & _INT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return value


def get_placeholder_style(item: SearchResultItem) -> str:
    """Pick a deterministic placeholder gradient for a result without image.

    The same title always maps to the same gradient; different titles may
    share one.
    """
    index = abs(_title_hash(get_title(item))) % len(PLACEHOLDER_GRADIENTS)
    return PLACEHOLDER_GRADIENTS[index]


def parse_published(value: str | None) -> datetime | None:
    """Parse a CMS published timestamp.

    ISO 8601 is tried first, then dateutil's free-form parser.

    Args:
        value: Timestamp string as sent by the CMS.

    Returns:
        Parsed datetime, or None if missing or unparsable.
    """
    if not value:
        return None
    try:
        return date_parser.isoparse(value)
    except (ValueError, OverflowError):
        pass
    try:
        return date_parser.parse(value, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError):
        return None


def format_published_date(value: str | datetime | None) -> str:
    """Format a published timestamp as a long English date.

    Args:
        value: Timestamp string or datetime.

    Returns:
        Date such as "January 15, 2024", or "" if missing or unparsable.
    """
    moment = value if isinstance(value, datetime) else parse_published(value)
    if moment is None:
        return ""
    return f"{moment:%B} {moment.day}, {moment.year}"
