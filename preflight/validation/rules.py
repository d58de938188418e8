"""
Rule Registry

The fixed catalog of content rules. Each rule pairs a predicate that
returns True when the item is invalid with a builder for the message
shown to the author.

Every predicate is total: it reads attributes with getattr() and
treats wrong types as data, so applying a rule to an item that lacks
the attribute returns a plain boolean instead of raising.
"""

import math
import re
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from preflight.items import ArticleType
from preflight.slug import slug_error_message, validate_slug


MAX_TOPICS = 5

BOOK_PRICE_MIN = 200
BOOK_PRICE_MAX = 5000
BOOK_PRICE_UNIT = 100

CHAPTER_POSITION_MIN = 1
CHAPTER_POSITION_MAX = 50

# One emoji and nothing else: a dingbat, a flag (regional indicator pair),
# any supplementary-plane character, a keycap sequence or a BMP pictograph.
EMOJI_PATTERN = re.compile(
    "(?:"
    "[\u2700-\u27bf]"
    "|[\U0001F1E6-\U0001F1FF]{2}"
    "|[\U00010000-\U0010FFFF]"
    "|[\u0023-\u0039]\ufe0f?\u20e3"
    "|\u3299|\u3297|\u303d|\u3030|\u24c2"
    "|\u203c|\u2049|[\u25aa-\u25ab]|\u25b6|\u25c0|[\u25fb-\u25fe]"
    "|\u00a9|\u00ae|\u2122|\u2139"
    "|[\u2600-\u26ff]"
    "|\u2b05|\u2b06|\u2b07|\u2b1b|\u2b1c|\u2b50|\u2b55"
    "|\u231a|\u231b|\u2328|\u23cf|[\u23e9-\u23f3]|[\u23f8-\u23fa]"
    "|\u2934|\u2935|[\u2190-\u21ff]"
    ")"
)

# Decimal or exponent notation in ASCII digits, optionally padded by whitespace
NUMERIC_STRING_PATTERN = re.compile(
    r"\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|Infinity)\s*",
    re.ASCII,
)

# ASCII punctuation and space
TOPIC_SYMBOL_PATTERN = re.compile(r"[ -/:-@\[-`{-~]")

_ARTICLE_TYPES = tuple(t.value for t in ArticleType)


@dataclass(frozen=True)
class Rule:
    """A named predicate/message pair checking one concern.

    Attributes:
        name: Stable rule identifier, reported on each finding
        predicate: Returns True when the item violates the rule
        message: Builds the author-facing message for a violating item
        is_critical: True if a violation blocks publishing
        reads: Item attributes the rule inspects
    """
    name: str
    predicate: Callable[[Any], bool]
    message: Callable[[Any], str]
    is_critical: bool = False
    reads: Tuple[str, ...] = ()


def _has_length(value: Any) -> bool:
    return isinstance(value, Sized) and len(value) > 0


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _to_number(value: Any) -> float:
    """Loose numeric view of a field, NaN when it has none.

    Booleans count as 0 and 1. Strings must use ASCII decimal notation;
    a blank string is 0. Anything else is NaN.
    """
    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if not value.strip():
            return 0
        if NUMERIC_STRING_PATTERN.fullmatch(value):
            return float(value.strip().replace("Infinity", "inf"))
    return math.nan


def _is_set(value: Any) -> bool:
    """True unless the value is None, False, zero, NaN or an empty string.

    Containers count as set even when empty.
    """
    if _is_nan(value):
        return False
    if value is None or isinstance(value, (bool, int, float, str)):
        return bool(value)
    return True


def invalid_slug_rule(
    validate: Callable[[Any], bool] = validate_slug,
    message: Callable[[Any], str] = slug_error_message,
) -> Rule:
    """Build the InvalidSlug rule around a slug validator and its message."""
    return Rule(
        name="InvalidSlug",
        is_critical=True,
        predicate=lambda item: not validate(getattr(item, "slug", None)),
        message=lambda item: message(getattr(item, "slug", None)),
        reads=("slug",),
    )


def _topics_have_symbols(item: Any) -> bool:
    topics = getattr(item, "topics", None)
    if not _is_sequence(topics):
        return False
    return any(TOPIC_SYMBOL_PATTERN.search(str(topic)) for topic in topics)


def _emoji_is_malformed(item: Any) -> bool:
    emoji = getattr(item, "emoji", None)
    if not _is_set(emoji):
        return False
    if not isinstance(emoji, str):
        return True
    return EMOJI_PATTERN.fullmatch(emoji) is None


def _price_out_of_range(item: Any) -> bool:
    price = getattr(item, "price", None)
    if not _is_set(price):
        return False
    price = _to_number(price)
    return price > BOOK_PRICE_MAX or price < BOOK_PRICE_MIN


def _price_not_in_units(item: Any) -> bool:
    price = getattr(item, "price", None)
    if not _is_set(price):
        return False
    remainder = _to_number(price) % BOOK_PRICE_UNIT
    return _is_nan(remainder) or remainder != 0


def _position_out_of_range(item: Any) -> bool:
    position = _to_number(getattr(item, "position", None))
    if _is_nan(position):
        return True
    return position < CHAPTER_POSITION_MIN or position > CHAPTER_POSITION_MAX


def _position_has_leading_zero(item: Any) -> bool:
    position = getattr(item, "position", None)
    return isinstance(position, str) and position.startswith("0")


INVALID_SLUG = invalid_slug_rule()

MISSING_TITLE = Rule(
    name="MissingTitle",
    is_critical=True,
    predicate=lambda item: not _has_length(getattr(item, "title", None)),
    message=lambda item: "Enter a title",
    reads=("title",),
)

ARTICLE_TYPE = Rule(
    name="ArticleType",
    is_critical=True,
    predicate=lambda item: getattr(item, "type", None) not in _ARTICLE_TYPES,
    message=lambda item: (
        "Set type to either tech or idea. Use tech for technical articles"
    ),
    reads=("type",),
)

EMOJI_FORMAT = Rule(
    name="EmojiFormat",
    is_critical=True,
    predicate=_emoji_is_malformed,
    message=lambda item: "The emoji is invalid (only a single emoji character can be used)",
    reads=("emoji",),
)

MISSING_EMOJI = Rule(
    name="MissingEmoji",
    predicate=lambda item: not _is_set(getattr(item, "emoji", None)),
    message=lambda item: "Set an emoji to use as the eye-catch image",
    reads=("emoji",),
)

MISSING_TOPICS = Rule(
    name="MissingTopics",
    is_critical=True,
    predicate=lambda item: (
        not _has_length(getattr(item, "topics", None))
        or not _is_sequence(getattr(item, "topics", None))
    ),
    message=lambda item: (
        'Set topics (related languages or technologies) as a list, e.g. ["react", "javascript"]'
    ),
    reads=("topics",),
)

TOO_MANY_TOPICS = Rule(
    name="TooManyTopics",
    is_critical=True,
    predicate=lambda item: (
        _is_sequence(getattr(item, "topics", None))
        and len(getattr(item, "topics")) > MAX_TOPICS
    ),
    message=lambda item: f"At most {MAX_TOPICS} topics can be set",
    reads=("topics",),
)

INVALID_TOPIC_LETTERS = Rule(
    name="InvalidTopicLetters",
    predicate=_topics_have_symbols,
    message=lambda item: (
        "Topics cannot contain symbols or spaces. "
        'Write C++ as "cpp" and C# as "csharp", for example'
    ),
    reads=("topics",),
)

USE_TAGS_INSTEAD_OF_TOPICS = Rule(
    name="UseTagsInsteadOfTopics",
    predicate=lambda item: _has_length(getattr(item, "tags", None)),
    message=lambda item: "Use topics instead of tags",
    reads=("tags",),
)

BOOK_SUMMARY = Rule(
    name="BookSummary",
    is_critical=True,
    predicate=lambda item: not _has_length(getattr(item, "summary", None)),
    message=lambda item: "A summary (description of the book) is required",
    reads=("summary",),
)

BOOK_PRICE_TYPE = Rule(
    name="BookPriceType",
    is_critical=True,
    predicate=lambda item: not _is_number(getattr(item, "price", None)),
    message=lambda item: (
        "Set price as a number, not a string (do not wrap it in quotes)"
    ),
    reads=("price",),
)

BOOK_PRICE_RANGE = Rule(
    name="BookPriceRange",
    is_critical=True,
    predicate=_price_out_of_range,
    message=lambda item: (
        f"A paid book must have a price between {BOOK_PRICE_MIN} and {BOOK_PRICE_MAX}"
    ),
    reads=("price",),
)

BOOK_PRICE_FRACTION = Rule(
    name="BookPriceFraction",
    is_critical=True,
    predicate=_price_not_in_units,
    message=lambda item: f"Set price in units of {BOOK_PRICE_UNIT} yen",
    reads=("price",),
)

MISSING_BOOK_COVER = Rule(
    name="MissingBookCover",
    predicate=lambda item: not getattr(item, "cover_data_url", None),
    message=lambda item: (
        "Place a cover image (cover.png or cover.jpg) in the "
        f"/books/{getattr(item, 'slug', None)} directory"
    ),
    reads=("cover_data_url", "slug"),
)

CHAPTER_FORMAT = Rule(
    name="ChapterFormat",
    is_critical=True,
    predicate=_position_has_leading_zero,
    message=lambda item: (
        "Chapter file names cannot start with 0. "
        f"Use a number from {CHAPTER_POSITION_MIN} to {CHAPTER_POSITION_MAX}, such as 1.md"
    ),
    reads=("position",),
)

CHAPTER_POSITION = Rule(
    name="ChapterPosition",
    is_critical=True,
    predicate=_position_out_of_range,
    message=lambda item: (
        "Name each chapter file after its number, such as 1.md "
        f"({CHAPTER_POSITION_MIN} to {CHAPTER_POSITION_MAX} in ASCII digits)"
    ),
    reads=("position",),
)


RULES: Dict[str, Rule] = {
    rule.name: rule
    for rule in (
        INVALID_SLUG,
        MISSING_TITLE,
        ARTICLE_TYPE,
        EMOJI_FORMAT,
        MISSING_EMOJI,
        MISSING_TOPICS,
        TOO_MANY_TOPICS,
        INVALID_TOPIC_LETTERS,
        USE_TAGS_INSTEAD_OF_TOPICS,
        BOOK_SUMMARY,
        BOOK_PRICE_TYPE,
        BOOK_PRICE_RANGE,
        BOOK_PRICE_FRACTION,
        MISSING_BOOK_COVER,
        CHAPTER_FORMAT,
        CHAPTER_POSITION,
    )
}
