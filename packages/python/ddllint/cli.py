"""Command-line interface for ddllint."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from . import __version__
from .config import LintConfig
from .exceptions import ConfigurationError
from .log import configure_logging
from .rules import DEFAULT_CATALOG
from .sinks import ConsoleSink
from .validator import Validator

EXIT_CLEAN = 0
EXIT_LINT_ERRORS = 1
EXIT_CONFIGURATION_ERROR = 2


def _print_catalog() -> None:
    for definition in DEFAULT_CATALOG:
        click.echo(f"{definition.rule_id} ({definition.severity.value})")
        click.echo(f"    fail: {definition.error_message}")
        click.echo(f"    pass: {definition.success_message}")


@click.command()
@click.argument("script", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--disable", "disabled", multiple=True, metavar="RULE", help="Skip a rule")
@click.option("--only", "only", multiple=True, metavar="RULE", help="Run only these rules")
@click.option("--no-colors", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", count=True, help="Log progress to stderr (-vv for debug)")
@click.option("--list-rules", is_flag=True, help="Print the rule catalog and exit")
@click.version_option(__version__, prog_name="ddllint")
def main(
    script: TextIO,
    disabled: tuple[str, ...],
    only: tuple[str, ...],
    no_colors: bool,
    verbose: int,
    list_rules: bool,
) -> None:
    """
    Lint a DDL script against the house naming and tablespace conventions.

    SCRIPT is a file of statements separated by '/', or '-' for stdin.
    Exits with 1 if any statement has an error, 2 on a bad rule selection.
    """
    configure_logging(verbose)

    if list_rules:
        _print_catalog()
        sys.exit(EXIT_CLEAN)

    config = LintConfig(
        disabled_rules=set(disabled),
        enabled_rules=set(only) if only else None,
    )

    try:
        validator = Validator(config)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(EXIT_CONFIGURATION_ERROR)

    try:
        text = script.read()
    except UnicodeDecodeError as e:
        raise click.BadParameter(
            f"not valid UTF-8 ({e.reason} at byte {e.start})", param_hint="SCRIPT"
        ) from e

    report = validator.validate(text, sink=ConsoleSink(use_colors=not no_colors))

    if report.total:
        click.echo(
            f"{report.total} statement(s): {report.passed} passed, "
            f"{report.error_count} error(s), {report.warning_count} warning(s)",
            err=True,
        )

    sys.exit(EXIT_LINT_ERRORS if report.has_errors else EXIT_CLEAN)


if __name__ == "__main__":
    main()
