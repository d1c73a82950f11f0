"""Rule discouraging double-quoted identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Rule, RuleResult
from .catalog import RuleId
from .registry import RuleRegistry

if TYPE_CHECKING:
    from ..config import LintConfig
    from ..statement import StatementText


class DoubleQuotesRule(Rule):
    """Flags any double quote in the statement.

    Quoted identifiers are case-sensitive in Oracle and make every later
    reference to the object awkward. Reported as a warning by the default
    catalog.
    """

    @property
    def rule_id(self) -> str:
        return RuleId.NO_DOUBLE_QUOTES.value

    @property
    def name(self) -> str:
        return "No Double Quotes"

    @property
    def description(self) -> str:
        return "Statements should not contain double quotes."

    def check(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> RuleResult:
        position = statement.value.find('"')
        if position != -1:
            return self._fail(details={"position": position})
        return self._pass()


# Register the rule
RuleRegistry.get_instance().register(DoubleQuotesRule())
