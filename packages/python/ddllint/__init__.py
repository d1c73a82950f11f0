"""ddllint - convention linter for Oracle DDL scripts.

ddllint splits a script on the ``/`` terminator and checks every statement
against a fixed set of house conventions: tablespaces, temp table names,
constraint names and forbidden characters.

Quick Start:
    >>> import ddllint

    >>> ddllint.is_clean("CREATE TABLE foo (a int) TABLESPACE ACCTDATA /")
    True
    >>> report = ddllint.lint("CREATE TABLE foo (a int) /")
    >>> [o.message for o in report.results[0].outcomes]
    ['The tablespace is invalid.']

    # With custom configuration
    >>> from ddllint import LintConfig, Validator
    >>> v = Validator(LintConfig(disabled_rules={"no-double-quotes"}))
    >>> v.validate('CREATE TABLE "foo" (a int) TABLESPACE ACCTDATA /').has_errors
    False

Rules (in evaluation order):
    - create-table-tablespace: CREATE TABLE needs an allowed data tablespace
    - create-index-tablespace: CREATE INDEX needs an allowed index tablespace
    - temp-table-naming: temporary tables must start with temp_
    - no-double-quotes: double quotes are discouraged (warning)
    - constraint-naming: CK_/FK_/PK_/UQ_/NN_ naming conventions
"""

from __future__ import annotations

from .config import LintConfig
from .engine import RuleEngine
from .exceptions import ConfigurationError, DdlLintError
from .result import RuleOutcome, StatementResult, ValidationReport
from .rules import DEFAULT_CATALOG, RuleDefinition, RuleId, RuleSeverity
from .sinks import ConsoleSink, Level, ListSink, ResultSink
from .splitter import split_script
from .statement import StatementText
from .validator import Validator

__version__ = "0.1.0"
__all__ = [
    # Main API
    "lint",
    "is_clean",
    "Validator",
    "RuleEngine",
    "LintConfig",
    # Building blocks
    "StatementText",
    "split_script",
    # Rules
    "DEFAULT_CATALOG",
    "RuleDefinition",
    "RuleId",
    "RuleSeverity",
    # Results
    "RuleOutcome",
    "StatementResult",
    "ValidationReport",
    # Sinks
    "Level",
    "ResultSink",
    "ListSink",
    "ConsoleSink",
    # Exceptions
    "DdlLintError",
    "ConfigurationError",
]

# Default validator instance for simple API
_default_validator: Validator | None = None


def _get_default_validator() -> Validator:
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def lint(
    script: str,
    *,
    config: LintConfig | None = None,
    sink: ResultSink | None = None,
) -> ValidationReport:
    """Lint a DDL script.

    For repeated linting with a custom configuration, create a Validator
    instance instead.

    Args:
        script: The raw script, statements separated by ``/``.
        config: Optional lint configuration.
        sink: Optional receiver for rendered messages.

    Returns:
        ValidationReport with one StatementResult per statement.
    """
    validator = _get_default_validator() if config is None else Validator(config)
    return validator.validate(script, sink=sink)


def is_clean(script: str, *, config: LintConfig | None = None) -> bool:
    """Check that a script produces no ERROR outcomes (warnings allowed).

    This is a shorthand for ``not lint(script).has_errors``.
    """
    return not lint(script, config=config).has_errors
