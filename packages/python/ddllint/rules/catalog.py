"""The fixed, ordered catalog of lint rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import RuleSeverity


class RuleId(str, Enum):
    """Identifiers of every rule ddllint knows how to evaluate."""

    CREATE_TABLE_TABLESPACE = "create-table-tablespace"
    CREATE_INDEX_TABLESPACE = "create-index-tablespace"
    TEMP_TABLE_NAMING = "temp-table-naming"
    NO_DOUBLE_QUOTES = "no-double-quotes"
    CONSTRAINT_NAMING = "constraint-naming"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RuleDefinition:
    """A catalog entry: which rule runs, how bad a failure is, what to say.

    Attributes:
        rule_id: Identifier of the evaluator to run.
        severity: Severity of every failure reported by this rule.
        error_message: Message reported when the rule fails.
        success_message: Summary used when the rule passes everywhere.
    """

    rule_id: str
    severity: RuleSeverity
    error_message: str
    success_message: str

    def message_for(self, detail: str | None) -> str:
        """Build the failure message, appending ``detail`` when present."""
        if detail:
            return f"{self.error_message} {detail}"
        return self.error_message


DEFAULT_CATALOG: tuple[RuleDefinition, ...] = (
    RuleDefinition(
        rule_id=RuleId.CREATE_TABLE_TABLESPACE.value,
        severity=RuleSeverity.ERROR,
        error_message="The tablespace is invalid.",
        success_message="The tablespace is valid for all the create table statements.",
    ),
    RuleDefinition(
        rule_id=RuleId.CREATE_INDEX_TABLESPACE.value,
        severity=RuleSeverity.ERROR,
        error_message="The tablespace is invalid.",
        success_message="The tablespace is valid for all the create index statements.",
    ),
    RuleDefinition(
        rule_id=RuleId.TEMP_TABLE_NAMING.value,
        severity=RuleSeverity.ERROR,
        error_message="Table name must contain a temp_ prefix for temp tables.",
        success_message="All the temp table names are correct.",
    ),
    RuleDefinition(
        rule_id=RuleId.NO_DOUBLE_QUOTES.value,
        severity=RuleSeverity.WARNING,
        error_message="Double quotes should be avoided in the query.",
        success_message="No double-quotes found in the query.",
    ),
    RuleDefinition(
        rule_id=RuleId.CONSTRAINT_NAMING.value,
        severity=RuleSeverity.ERROR,
        error_message=(
            "Invalid constraint name, please refer documentation for valid constraint names."
        ),
        success_message="All constraint names are correct.",
    ),
)
