"""Text processing utilities."""

import re
import unicodedata

from qrmenu.core.constants import MAX_SLUG_LENGTH


def generate_slug(name: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Generate a URL-safe slug from a shop name.

    Converts the input string to a slug by:
    - Folding accented letters to ASCII and lowercasing
    - Dropping anything that is not a letter, digit, space or hyphen
    - Collapsing spaces, underscores and hyphens into single hyphens
    - Truncating to max_length without a trailing hyphen

    Args:
        name: The input string to slugify
        max_length: Maximum length of output slug (default 63)

    Returns:
        Lowercase slug, possibly empty when the name has no usable characters

    Examples:
        >>> generate_slug("Coffee Kings")
        'coffee-kings'
        >>> generate_slug("Café Crème #2")
        'cafe-creme-2'
    """
    slug = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = slug.lower().strip()
    slug = re.sub(r"[^a-z0-9\s_-]", "", slug)
    slug = re.sub(r"[-\s_]+", "-", slug).strip("-")
    return slug[:max_length].rstrip("-")
