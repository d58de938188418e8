"""
Validation Engine

Evaluates rule sets against content items. evaluate() and the
get_*_errors() helpers are pure; ValidationEngine adds loading from
disk, timing and report assembly on top of them.
"""

import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional, Union

from preflight.content.loader import discover, load_item
from preflight.errors import ContentLoadError
from preflight.items import Article, Book, Chapter, Item, ItemKind
from preflight.utils.logging_config import logging_config
from preflight.validation.report import Finding, ValidationReport
from preflight.validation.rule_sets import (
    ARTICLE_RULES,
    BOOK_RULES,
    CHAPTER_RULES,
    rule_set_for,
)
from preflight.validation.rules import Rule


logger = logging.getLogger(__name__)

CONTENT_LOAD_RULE = "ContentLoad"


def evaluate(item: Item, rules: Iterable[Rule]) -> List[Finding]:
    """Apply every rule to an item.

    Args:
        item: The item to check.
        rules: Rules in reporting order.

    Returns:
        One Finding per violated rule, in rule order. An empty list
        means the item passed.
    """
    findings: List[Finding] = []
    for rule in rules:
        if rule.predicate(item):
            finding = Finding(
                is_critical=rule.is_critical,
                message=rule.message(item),
                rule=rule.name,
            )
            logger.debug(f"{rule.name} failed ({finding.level}): {finding.message}")
            findings.append(finding)
    return findings


def get_article_errors(article: Article) -> List[Finding]:
    return evaluate(article, ARTICLE_RULES)


def get_book_errors(book: Book) -> List[Finding]:
    return evaluate(book, BOOK_RULES)


def get_chapter_errors(chapter: Chapter) -> List[Finding]:
    return evaluate(chapter, CHAPTER_RULES)


def get_errors(item: Item) -> List[Finding]:
    """Evaluate an item against the rule set of its own kind."""
    return evaluate(item, rule_set_for(item.kind))


def _identifier(item: Item) -> Optional[str]:
    field = "position" if item.kind == ItemKind.CHAPTER else "slug"
    value = getattr(item, field, None)
    return None if value is None else str(value)


class ValidationEngine:
    """Validation orchestrator for content items.

    Validates in-memory items, single files or book directories, and
    whole content directories, returning one ValidationReport per item.
    """

    def __init__(self, strict: bool = False):
        """Initialize the validation engine.

        Args:
            strict: If True, warnings also make an item invalid.
        """
        self.strict = strict

    def validate_item(self, item: Item, file_path: str = "<memory>") -> ValidationReport:
        """Validate an already constructed item."""
        start = time.time()
        findings = get_errors(item)
        elapsed = time.time() - start

        logging_config.log_operation_timing(f"Validation of {file_path}", elapsed)
        return ValidationReport(
            file_path=file_path,
            kind=item.kind.value,
            identifier=_identifier(item),
            findings=findings,
            strict=self.strict,
            duration_ms=int(elapsed * 1000),
        )

    def validate_path(self, path: Union[str, Path], kind: ItemKind) -> ValidationReport:
        """Load and validate one item.

        A file that cannot be loaded yields a report with a single
        critical ContentLoad finding instead of an exception.
        """
        kind = ItemKind(kind)
        try:
            item = load_item(path, kind)
        except ContentLoadError as e:
            logger.warning(f"Failed to load {path}: {e}")
            return ValidationReport(
                file_path=str(path),
                kind=kind.value,
                findings=[Finding(is_critical=True, message=str(e), rule=CONTENT_LOAD_RULE)],
                strict=self.strict,
            )
        return self.validate_item(item, str(path))

    def validate_directory(self, content_dir: Union[str, Path]) -> List[ValidationReport]:
        """Validate every article, book and chapter under a content directory."""
        start = time.time()
        reports = [
            self.validate_path(path, kind) for kind, path in discover(content_dir)
        ]
        if not reports:
            logger.info(f"No content found under {content_dir}")

        logging_config.log_operation_timing(
            f"Validation of {len(reports)} item(s)", time.time() - start
        )
        return reports
