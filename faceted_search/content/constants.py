"""Constants for the content accessors."""

# Title returned when neither variant exposes a usable title field
UNTITLED: str = "Untitled"

# Default excerpt length in characters
DEFAULT_EXCERPT_LENGTH: int = 200

# Appended to excerpts that were cut at max_length
TRUNCATION_SUFFIX: str = "..."

# Placeholder gradients for results without an image.
# Order matters: the title hash indexes into this tuple.
PLACEHOLDER_GRADIENTS: tuple[str, ...] = (
    "bg-gradient-to-br from-primary/20 to-secondary/20",
    "bg-gradient-to-br from-accent/20 to-primary/20",
    "bg-gradient-to-br from-secondary/20 to-accent/20",
    "bg-gradient-to-br from-info/20 to-primary/20",
    "bg-gradient-to-br from-success/20 to-secondary/20",
    "bg-gradient-to-br from-primary/20 to-accent/20",
    "bg-gradient-to-br from-secondary/20 to-info/20",
    "bg-gradient-to-br from-accent/20 to-success/20",
)
