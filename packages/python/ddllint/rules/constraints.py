"""Rule enforcing constraint naming conventions on ALTER TABLE ... ADD CONSTRAINT."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import Rule, RuleResult
from .catalog import RuleId
from .registry import RuleRegistry

if TYPE_CHECKING:
    from ..config import LintConfig
    from ..statement import StatementText

TABLE_PLACEHOLDER = "<TABLE_NAME>"
COLUMN_PLACEHOLDER = "<COLUMN_NAME>"


@dataclass(frozen=True)
class NamingConvention:
    """How one kind of constraint must be named.

    Attributes:
        label: Human-readable constraint kind, used in failure messages.
        pattern: Regex with three groups: table name, declared constraint
            name and column name (the last may not participate).
        name_format: Expected name, with ``<TABLE_NAME>`` and
            ``<COLUMN_NAME>`` placeholders.
    """

    label: str
    pattern: re.Pattern[str]
    name_format: str

    def expected_name(self, table_name: str, column_name: str = "") -> str:
        """Substitute the placeholders of ``name_format``."""
        return self.name_format.replace(TABLE_PLACEHOLDER, table_name, 1).replace(
            COLUMN_PLACEHOLDER, column_name, 1
        )


def _convention(label: str, pattern: str, name_format: str) -> NamingConvention:
    return NamingConvention(
        label=label,
        pattern=re.compile(pattern, re.IGNORECASE | re.MULTILINE),
        name_format=name_format,
    )


NAMING_CONVENTIONS: tuple[NamingConvention, ...] = (
    _convention(
        "Check constraint",
        r"ALTER TABLE(.*)ADD CONSTRAINT\s+(CK_.*)\s+CHECK\s*\(\s*(\S+)\s+.*$",
        "CK_<TABLE_NAME>_<COLUMN_NAME>",
    ),
    _convention(
        "Foreign key constraint",
        r"ALTER TABLE(.*)ADD CONSTRAINT\s+(.*)\s+FOREIGN KEY\s*\((?:.*,)?\s*([^\s,)]+)\s*\)\s*.*"
        r"REFERENCES.*$",
        "FK_<TABLE_NAME>_<COLUMN_NAME>",
    ),
    _convention(
        "Primary key constraint",
        r"ALTER TABLE(.*)ADD CONSTRAINT\s+(.*)\s+PRIMARY KEY\s*\(\s*([^\s,)]+)",
        "PK_<TABLE_NAME>",
    ),
    _convention(
        "Unique key constraint",
        r"ALTER TABLE(.*)ADD CONSTRAINT\s+(.*)\s+UNIQUE\s*\(\s*([^\s,)]+)",
        "UQ_<TABLE_NAME>_<COLUMN_NAME>",
    ),
    _convention(
        "NOT NULL constraint",
        r"ALTER TABLE(.*)ADD CONSTRAINT\s+(NN_.*)\s+CHECK\s*\(\s*(\S+)\s+.*$",
        "NN_<TABLE_NAME>_<COLUMN_NAME>",
    ),
)


class ConstraintNamingRule(Rule):
    """Constraint names must follow the convention for their kind.

    Every convention is tried independently against the statement. For each
    one that matches, the expected name is built from the table and column
    names and the declared name must be a substring of it. A statement can
    therefore fail several conventions at once; each is reported separately.
    """

    def __init__(self, conventions: tuple[NamingConvention, ...] = NAMING_CONVENTIONS) -> None:
        self._conventions = conventions

    @property
    def rule_id(self) -> str:
        return RuleId.CONSTRAINT_NAMING.value

    @property
    def name(self) -> str:
        return "Constraint Naming"

    @property
    def description(self) -> str:
        return (
            "Constraints added with ALTER TABLE must be named CK_, FK_, PK_, UQ_ "
            "or NN_ followed by the table (and column) name."
        )

    def check(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> RuleResult:
        """Return the first naming violation, if any."""
        failures = self.check_all(statement, config, **context)
        return failures[0] if failures else self._pass()

    def check_all(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> list[RuleResult]:
        failures: list[RuleResult] = []
        for convention in self._conventions:
            match = convention.pattern.search(statement.value)
            if match is None:
                continue

            table_name = match.group(1).strip()
            declared_name = match.group(2).strip()
            column_name = (match.group(3) or "").strip()
            expected_name = convention.expected_name(table_name, column_name)

            if declared_name not in expected_name:
                failures.append(
                    self._fail(
                        f"Fails test for {convention.label}, "
                        f"format should be {convention.name_format}.",
                        {
                            "convention": convention.label,
                            "declared": declared_name,
                            "expected": expected_name,
                        },
                    )
                )
        return failures


# Register the rule
RuleRegistry.get_instance().register(ConstraintNamingRule())
