"""
Validation Module for content-preflight

Provides the rule registry, the per-kind rule sets and the engine that
evaluates them against content items.
"""

from preflight.validation.report import Finding, ValidationReport
from preflight.validation.rules import RULES, Rule, invalid_slug_rule
from preflight.validation.rule_sets import (
    ARTICLE_RULES,
    BOOK_RULES,
    CHAPTER_RULES,
    rule_set_for,
)
from preflight.validation.engine import (
    ValidationEngine,
    evaluate,
    get_article_errors,
    get_book_errors,
    get_chapter_errors,
    get_errors,
)

__all__ = [
    "Finding",
    "ValidationReport",
    "Rule",
    "RULES",
    "invalid_slug_rule",
    "ARTICLE_RULES",
    "BOOK_RULES",
    "CHAPTER_RULES",
    "rule_set_for",
    "ValidationEngine",
    "evaluate",
    "get_article_errors",
    "get_book_errors",
    "get_chapter_errors",
    "get_errors",
]
