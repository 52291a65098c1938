"""Client-side sort keys for the merged result list.

Only date and title orders are re-applied after the merge. Relevance and
semantic ranking happen per query inside the search index, and the two
queries do not share a score scale, so their merged order is left as the
sources returned it.
"""

import unicodedata
from collections.abc import Callable, Mapping
from datetime import UTC
from types import MappingProxyType
from typing import Any

from faceted_search.content import ArticlePage, SearchResultItem, parse_published
from faceted_search.ordering import SortOrderKey


SortKey = Callable[[SearchResultItem], Any]


def published_timestamp(item: SearchResultItem) -> float:
    """Get the published time of a result as a POSIX timestamp.

    Naive timestamps are read as UTC. Missing or unparsable values sort
    as the epoch.
    """
    moment = parse_published(item.content.published)
    if moment is None:
        return 0.0
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    try:
        return moment.timestamp()
    except (OverflowError, OSError, ValueError):
        return 0.0


def sort_title(item: SearchResultItem) -> str:
    """Get the title a result sorts by.

    ArticlePage sorts on Heading, then display name; Experience sorts on
    its display name only.
    """
    content = item.content
    if isinstance(content, ArticlePage) and content.heading:
        return content.heading
    return content.display_name or ""


def collation_key(text: str) -> tuple[str, str]:
    """Build a case-insensitive, accent-folding collation key.

    Accented letters sort next to their base letter ("é" beside "e");
    the second component keeps accented and plain spellings apart.
    """
    lowered = text.casefold()
    folded = "".join(
        char
        for char in unicodedata.normalize("NFKD", lowered)
        if not unicodedata.combining(char)
    )
    return folded, lowered


def title_collation_key(item: SearchResultItem) -> tuple[str, str]:
    """Collation key of a result's sort title."""
    return collation_key(sort_title(item))


# Sort key and reverse flag for every client-sorted order
CLIENT_SORTS: Mapping[SortOrderKey, tuple[SortKey, bool]] = MappingProxyType(
    {
        SortOrderKey.DATE_DESC: (published_timestamp, True),
        SortOrderKey.DATE_ASC: (published_timestamp, False),
        SortOrderKey.TITLE_ASC: (title_collation_key, False),
        SortOrderKey.TITLE_DESC: (title_collation_key, True),
    }
)


def sort_results(
    items: list[SearchResultItem], sort_key: SortOrderKey
) -> list[SearchResultItem]:
    """Apply the client-side order for a sort key.

    The sort is stable in both directions: ties keep their input order.

    Args:
        items: Merged results in source order.
        sort_key: Normalized sort key.

    Returns:
        A new list; ``items`` in source order when the key is not
        client-sorted.
    """
    client_sort = CLIENT_SORTS.get(sort_key)
    if client_sort is None:
        return list(items)
    key, reverse = client_sort
    return sorted(items, key=key, reverse=reverse)
