"""
Check Subcommand Module

Validates content items (articles, books, chapters) against the
publishing rules. Checks a whole content directory or a single item
and can write a consolidated JSON report.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from cli.help_texts import (
    CHECK_CONTENT_DIR_HELP,
    CHECK_FILE_HELP,
    CHECK_FORMAT_HELP,
    CHECK_HELP,
    CHECK_KIND_HELP,
    CHECK_REPORT_HELP,
    CHECK_STRICT_HELP,
    CONFIG_HELP,
    LOG_FILE_HELP,
    LOG_LEVEL_HELP,
    ExitCodes,
)
from preflight.config.environment import EnvironmentVariables
from preflight.config.manager import ConfigurationManager
from preflight.config.schema import ReportFormat
from preflight.content.loader import infer_kind
from preflight.errors import ConfigurationError
from preflight.items import ItemKind
from preflight.utils.logging_config import configure_logging, logging_config
from preflight.validation.engine import ValidationEngine
from preflight.validation.report import ValidationReport


logger = logging.getLogger(__name__)


def _environment_epilog() -> str:
    lines = ["Environment variables:"]
    for name, description in EnvironmentVariables.get_variable_documentation().items():
        lines.append(f"  {name}: {description}")
    return "\b\n" + "\n".join(lines)


@click.command(help=CHECK_HELP, epilog=_environment_epilog())
@click.option(
    "--content-dir", "-d",
    type=click.Path(file_okay=False),
    default=None,
    help=CHECK_CONTENT_DIR_HELP,
)
@click.option(
    "--file", "-f",
    "file_path",
    type=click.Path(exists=True),
    default=None,
    help=CHECK_FILE_HELP,
)
@click.option(
    "--kind", "-k",
    type=click.Choice([k.value for k in ItemKind], case_sensitive=False),
    default=None,
    help=CHECK_KIND_HELP,
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help=CHECK_STRICT_HELP,
)
@click.option(
    "--report", "-r",
    "report_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=CHECK_REPORT_HELP,
)
@click.option(
    "--format",
    "report_format",
    type=click.Choice([f.value for f in ReportFormat], case_sensitive=False),
    default=None,
    help=CHECK_FORMAT_HELP,
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help=CONFIG_HELP,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help=LOG_LEVEL_HELP,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help=LOG_FILE_HELP,
)
def check(
    content_dir: Optional[str],
    file_path: Optional[str],
    kind: Optional[str],
    strict: Optional[bool],
    report_path: Optional[str],
    report_format: Optional[str],
    config_file: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Check content items against the publishing rules.

    Examples:
        # Check everything under the current directory
        content-preflight check

        # Check a different content directory, failing on warnings too
        content-preflight check --content-dir ./site --strict

        # Check one article
        content-preflight check --file articles/my-first-article.md

        # Write a JSON report
        content-preflight check --report preflight.json
    """
    try:
        config = ConfigurationManager().load_configuration(
            config_file=config_file,
            cli_overrides={
                "content_dir": content_dir,
                "strict": strict,
                "report_format": report_format.lower() if report_format else None,
                "log_level": log_level.lower() if log_level else None,
                "log_file": log_file,
            },
        )
    except ConfigurationError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    configure_logging(level=config.log_level, log_file=config.log_file)
    logging_config.log_configuration_details(vars(config))

    engine = ValidationEngine(strict=config.strict)

    if file_path:
        item_kind = ItemKind(kind.lower()) if kind else infer_kind(file_path)
        if item_kind is None:
            click.echo(
                f"Error: cannot infer the item kind of {file_path}; use --kind",
                err=True,
            )
            sys.exit(ExitCodes.MISSING_REQUIRED_OPTION)
        logger.debug(f"Checking {file_path} as {item_kind.value}")
        reports = [engine.validate_path(file_path, item_kind)]
    else:
        logger.debug(f"Checking content directory {config.content_dir}")
        reports = engine.validate_directory(config.content_dir)

    consolidated = _consolidate(reports)

    if config.report_format == ReportFormat.JSON.value:
        click.echo(json.dumps(consolidated, indent=2, ensure_ascii=False))
    else:
        _echo_human(reports, consolidated)

    if report_path:
        _write_report(report_path, consolidated)
        click.echo(f"Report saved: {report_path}", err=True)

    if consolidated["failed"] > 0:
        sys.exit(ExitCodes.VALIDATION_FAILED)


def _consolidate(reports: List[ValidationReport]) -> dict:
    passed = sum(1 for r in reports if r.is_valid)
    return {
        "total": len(reports),
        "passed": passed,
        "failed": len(reports) - passed,
        "reports": [r.to_dict() for r in reports],
    }


def _echo_human(reports: List[ValidationReport], consolidated: dict):
    click.echo(f"Checking {len(reports)} item(s)...")

    for report in reports:
        click.echo(report.format_human())

    warnings_count = sum(1 for r in reports if r.is_valid and r.warnings)

    click.echo(f"\n  ✅ {consolidated['passed']} passed")
    if warnings_count:
        click.echo(f"  ⚠ {warnings_count} with warnings")
    if consolidated["failed"]:
        click.echo(f"  ❌ {consolidated['failed']} failed")


def _write_report(path: str, data: dict):
    """Write a JSON report to disk."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
