"""
Slug Helpers

Default slug capability used by the InvalidSlug rule. A slug is the
URL-safe identifier of an article or book: 12 to 50 characters of
lowercase ASCII letters, digits, hyphens and underscores.
"""

import re
from typing import Any


SLUG_MIN_LENGTH = 12
SLUG_MAX_LENGTH = 50

SLUG_PATTERN = re.compile(
    rf"[0-9a-z\-_]{{{SLUG_MIN_LENGTH},{SLUG_MAX_LENGTH}}}"
)


def validate_slug(slug: Any) -> bool:
    """Return True if ``slug`` is a well-formed slug."""
    if not isinstance(slug, str):
        return False
    return bool(SLUG_PATTERN.fullmatch(slug))


def slug_error_message(slug: Any) -> str:
    """Build the message shown when ``slug`` fails validation."""
    return (
        f"The slug ({slug}) is invalid. Use {SLUG_MIN_LENGTH} to {SLUG_MAX_LENGTH} "
        "characters made of lowercase letters (a-z), digits (0-9), "
        "hyphens (-) and underscores (_)"
    )
