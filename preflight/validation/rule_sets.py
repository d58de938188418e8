"""
Rule Sets

Ordered rule lists per item kind. Order only decides the order of
findings; every rule in a set is always evaluated.
"""

from typing import Dict, Tuple

from preflight.items import ItemKind
from preflight.validation.rules import (
    ARTICLE_TYPE,
    BOOK_PRICE_FRACTION,
    BOOK_PRICE_RANGE,
    BOOK_PRICE_TYPE,
    BOOK_SUMMARY,
    CHAPTER_FORMAT,
    CHAPTER_POSITION,
    EMOJI_FORMAT,
    INVALID_SLUG,
    INVALID_TOPIC_LETTERS,
    MISSING_BOOK_COVER,
    MISSING_EMOJI,
    MISSING_TITLE,
    MISSING_TOPICS,
    TOO_MANY_TOPICS,
    USE_TAGS_INSTEAD_OF_TOPICS,
    Rule,
)


RuleSet = Tuple[Rule, ...]

# Topic checks shared by articles and books
TOPIC_RULES: RuleSet = (
    MISSING_TOPICS,
    USE_TAGS_INSTEAD_OF_TOPICS,
    INVALID_TOPIC_LETTERS,
    TOO_MANY_TOPICS,
)

ARTICLE_RULES: RuleSet = (
    INVALID_SLUG,
    MISSING_TITLE,
    ARTICLE_TYPE,
    EMOJI_FORMAT,
    MISSING_EMOJI,
) + TOPIC_RULES

BOOK_RULES: RuleSet = (
    INVALID_SLUG,
    MISSING_TITLE,
) + TOPIC_RULES + (
    BOOK_SUMMARY,
    BOOK_PRICE_TYPE,
    BOOK_PRICE_RANGE,
    BOOK_PRICE_FRACTION,
    MISSING_BOOK_COVER,
)

CHAPTER_RULES: RuleSet = (
    CHAPTER_POSITION,
    CHAPTER_FORMAT,
    MISSING_TITLE,
)

RULE_SETS: Dict[ItemKind, RuleSet] = {
    ItemKind.ARTICLE: ARTICLE_RULES,
    ItemKind.BOOK: BOOK_RULES,
    ItemKind.CHAPTER: CHAPTER_RULES,
}


def rule_set_for(kind: ItemKind) -> RuleSet:
    """Return the ordered rules for an item kind.

    Raises:
        ValueError: If kind is not a known item kind.
    """
    try:
        return RULE_SETS[ItemKind(kind)]
    except (KeyError, ValueError):
        raise ValueError(
            f"Unknown item kind: {kind}. "
            f"Valid kinds: {[k.value for k in ItemKind]}"
        ) from None
