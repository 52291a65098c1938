"""Content variant models and accessors.

Models the two CMS content shapes (ArticlePage and Experience) as an
explicit tagged union and provides uniform accessors over them.
"""

from faceted_search.content.accessors import (
    format_published_date,
    get_excerpt,
    get_image_alt,
    get_image_url,
    get_placeholder_style,
    get_title,
    is_experience,
    parse_published,
    strip_markup,
)
from faceted_search.content.models import (
    ArticlePage,
    ContentType,
    ContentVariant,
    Experience,
    SearchResultItem,
)


__all__ = [
    "ArticlePage",
    "ContentType",
    "ContentVariant",
    "Experience",
    "SearchResultItem",
    "format_published_date",
    "get_excerpt",
    "get_image_alt",
    "get_image_url",
    "get_placeholder_style",
    "get_title",
    "is_experience",
    "parse_published",
    "strip_markup",
]
