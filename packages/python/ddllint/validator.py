"""Main Validator class - the primary entry point for ddllint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import LintConfig
from .engine import RuleEngine
from .log import get_logger
from .result import ValidationReport
from .rules.base import RuleSeverity
from .sinks import Level
from .splitter import split_script
from .statement import StatementText

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .result import StatementResult
    from .rules import RuleDefinition
    from .sinks import ResultSink

logger = get_logger(__name__)

EMPTY_SCRIPT_MESSAGE = "No SQL text to validate. Paste or load a script first."


class Validator:
    """DDL script linter.

    Splits a script on ``/``, runs every catalog rule against each statement
    and renders the results, statement by statement, to a result sink.

    Example:
        >>> validator = Validator()
        >>> report = validator.validate("CREATE TABLE foo (a int) TABLESPACE ACCTDATA /")
        >>> report.has_errors
        False

        >>> report = validator.validate("CREATE TABLE foo (a int) /")
        >>> report.results[0].outcomes[0].message
        'The tablespace is invalid.'
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        catalog: Sequence[RuleDefinition] | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            config: Lint configuration. If None, uses defaults.
            catalog: Rule catalog. If None, uses the built-in catalog.

        Raises:
            ConfigurationError: If the catalog or config refers to a rule
                with no evaluator.
        """
        self.config = config or LintConfig()
        if catalog is None:
            self._engine = RuleEngine(config=self.config)
        else:
            self._engine = RuleEngine(catalog=catalog, config=self.config)

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    def validate(self, text: str, sink: ResultSink | None = None) -> ValidationReport:
        """Lint a script.

        An empty string (checked exactly, without trimming) produces a single
        error and nothing else. Otherwise each statement produces either a
        success message or one message per failed rule, followed by a
        separator.

        Args:
            text: The raw script.
            sink: Optional receiver for rendered messages.

        Returns:
            ValidationReport with one StatementResult per statement.
        """
        if sink is not None:
            sink.clear()

        if text == "":
            logger.info("empty_script")
            if sink is not None:
                sink.emit(Level.ERROR, EMPTY_SCRIPT_MESSAGE)
            return ValidationReport(error=EMPTY_SCRIPT_MESSAGE)

        # Scoped to this call so one script's DROP TABLEs never leak into another
        script = StatementText(text)
        statements = split_script(text)
        logger.info("validating_script", statements=len(statements))

        results: list[StatementResult] = []
        for raw in statements:
            result = self._engine.evaluate(StatementText(raw), script=script)
            results.append(result)
            if sink is not None:
                self._render(result, sink)

        report = ValidationReport(results=results)
        logger.info(
            "script_validated",
            total=report.total,
            passed=report.passed,
            errors=report.error_count,
            warnings=report.warning_count,
        )
        return report

    def _render(self, result: StatementResult, sink: ResultSink) -> None:
        if result.passed:
            sink.emit(Level.SUCCESS, result.success_message or "")
        for outcome in result.outcomes:
            if outcome.severity == RuleSeverity.WARNING:
                sink.emit(Level.INFO, outcome.message)
            else:
                sink.emit(Level.ERROR, outcome.message)
        sink.separator(self.config.separator)
