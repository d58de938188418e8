"""
Content loading for content-preflight.

Turns markdown front matter and book configuration files into item models.
"""

from preflight.content.loader import (
    discover,
    infer_kind,
    load_article,
    load_book,
    load_chapter,
    load_item,
    parse_front_matter,
)

__all__ = [
    "discover",
    "infer_kind",
    "load_article",
    "load_book",
    "load_chapter",
    "load_item",
    "parse_front_matter",
]
