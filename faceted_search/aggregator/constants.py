"""Constants for the aggregator module."""

# Scores at or above this mark an editorial "best bet" on its own domain
PINNING_THRESHOLD: float = 20000.0

# Raw facet payload keys
AUTHOR_FACET_KEY: str = "Author"
METADATA_FACET_KEY: str = "_metadata"
TYPE_FACET_KEY: str = "types"
