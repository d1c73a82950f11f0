"""Base classes for lint rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import LintConfig
    from ..statement import StatementText


class RuleSeverity(str, Enum):
    """Severity of a rule violation.

    ERROR: The statement breaks a convention and must be fixed.
    WARNING: Informational; reported but does not fail the script.
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class RuleResult:
    """Result of a single rule evaluation.

    Attributes:
        passed: True if no violation was detected
        rule_id: Identifier of the rule that was evaluated
        detail: Extra text appended to the rule's catalog error message
        details: Additional structured details about the violation
    """

    passed: bool
    rule_id: str
    detail: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        """Allow using RuleResult in boolean context."""
        return self.passed


class Rule(ABC):
    """Abstract base class for lint rules.

    A rule only decides whether a statement passes. Severity and messages
    live in the rule catalog, so one evaluator can be reused with different
    wording without touching the check itself.

    Subclasses must implement:
    - rule_id: Unique identifier, matching a catalog entry
    - name: Human-readable name
    - description: What the rule checks
    - check(): The actual validation logic
    """

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique identifier for this rule (e.g., 'no-double-quotes')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this rule."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Detailed description of what this rule checks for."""
        ...

    @abstractmethod
    def check(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> RuleResult:
        """Check if the statement violates this rule.

        Args:
            statement: The normalized statement text
            config: Active lint configuration (allow-lists, prefixes)
            **context: Additional context (e.g., ``script``, the whole script)

        Returns:
            RuleResult indicating pass/fail and details
        """
        ...

    def check_all(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> list[RuleResult]:
        """Return every failure of this rule for the statement.

        Most rules fail at most once per statement. Rules that can report
        several independent violations override this.
        """
        result = self.check(statement, config, **context)
        return [] if result.passed else [result]

    def _pass(self) -> RuleResult:
        """Convenience method to return a passing result."""
        return RuleResult(passed=True, rule_id=self.rule_id)

    def _fail(self, detail: str | None = None, details: dict[str, Any] | None = None) -> RuleResult:
        """Convenience method to return a failing result."""
        return RuleResult(
            passed=False,
            rule_id=self.rule_id,
            detail=detail,
            details=details or {},
        )
