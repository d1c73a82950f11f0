"""Validation result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .rules.base import RuleSeverity

if TYPE_CHECKING:
    from .statement import StatementText

SUCCESS_PREFIX = "All rules passed."


@dataclass(frozen=True)
class RuleOutcome:
    """A failed rule for one statement.

    Attributes:
        rule_id: The rule that failed.
        severity: Severity taken from the rule's catalog entry.
        message: Catalog error message, plus any rule-specific detail.
    """

    rule_id: str
    severity: RuleSeverity
    message: str


@dataclass(frozen=True)
class StatementResult:
    """Immutable result of linting one statement.

    Attributes:
        statement: The normalized statement text.
        outcomes: Failed rules in catalog order. Empty means the statement passed.
    """

    statement: StatementText
    outcomes: tuple[RuleOutcome, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.outcomes

    @property
    def success_message(self) -> str | None:
        """Message shown when every rule passed (None otherwise)."""
        if self.outcomes:
            return None
        return f"{SUCCESS_PREFIX} {self.statement.value}"

    @property
    def errors(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if o.severity == RuleSeverity.ERROR]

    @property
    def warnings(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if o.severity == RuleSeverity.WARNING]

    def __bool__(self) -> bool:
        """Allow using result directly in boolean context."""
        return self.passed


@dataclass(frozen=True)
class ValidationReport:
    """Result of linting a whole script.

    Attributes:
        results: One entry per statement, in script order.
        error: Script-level error (e.g. empty input); no statements are
            evaluated when set.
    """

    results: list[StatementResult] = field(default_factory=list)
    error: str | None = None

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def error_count(self) -> int:
        return sum(len(r.errors) for r in self.results)

    @property
    def warning_count(self) -> int:
        return sum(len(r.warnings) for r in self.results)

    @property
    def has_errors(self) -> bool:
        """True if the script-level error or any ERROR outcome was produced."""
        return self.error is not None or self.error_count > 0

    def __bool__(self) -> bool:
        return not self.has_errors
