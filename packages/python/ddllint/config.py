"""Lint configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rules.catalog import RuleDefinition

DEFAULT_TABLE_TABLESPACES: tuple[str, ...] = ("ACCTDATA", "ACCTIMS", "ACCTGLOBDATA", "IAAUDITDATA")
DEFAULT_INDEX_TABLESPACES: tuple[str, ...] = ("ACCTINDX", "ACCTGLOBINDX", "IAAUDITINDX")
DEFAULT_TEMP_PREFIX = "temp_"
DEFAULT_SEPARATOR = "-" * 53


@dataclass
class LintConfig:
    """Configuration for a lint run.

    Attributes:
        enabled: Whether rules run at all. When False every statement passes.
        disabled_rules: Set of rule IDs to skip.
        enabled_rules: If set, ONLY run these rules (whitelist mode).
        table_tablespaces: Tablespaces allowed for CREATE TABLE.
        index_tablespaces: Tablespaces allowed for CREATE INDEX.
        temp_prefix: Required name prefix for temporary tables.
        separator: Line emitted after each statement's results.
    """

    enabled: bool = True
    disabled_rules: set[str] = field(default_factory=set)
    enabled_rules: set[str] | None = None
    table_tablespaces: tuple[str, ...] = DEFAULT_TABLE_TABLESPACES
    index_tablespaces: tuple[str, ...] = DEFAULT_INDEX_TABLESPACES
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    separator: str = DEFAULT_SEPARATOR

    def should_run_rule(self, definition: RuleDefinition) -> bool:
        """Determine if a catalog entry should be evaluated."""
        if not self.enabled:
            return False

        # Check whitelist mode
        if self.enabled_rules is not None:
            return definition.rule_id in self.enabled_rules

        return definition.rule_id not in self.disabled_rules

    def referenced_rules(self) -> set[str]:
        """Every rule ID named by this configuration."""
        referenced = set(self.disabled_rules)
        if self.enabled_rules is not None:
            referenced |= self.enabled_rules
        return referenced
