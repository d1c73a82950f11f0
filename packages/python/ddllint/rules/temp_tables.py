"""Rule enforcing the temp_ prefix on temporary tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..statement import StatementText
from .base import Rule, RuleResult
from .catalog import RuleId
from .registry import RuleRegistry

if TYPE_CHECKING:
    from ..config import LintConfig


class TempTableNamingRule(Rule):
    """Temporary tables must be named with the temp prefix.

    Two kinds of table count as temporary:
    - CREATE TEMPORARY TABLE statements
    - CREATE TABLE of a table that the same script later drops
      (a regular table used as scratch space)

    The second case needs the whole script, which the engine passes as the
    ``script`` context value for the current validation only.
    """

    @property
    def rule_id(self) -> str:
        return RuleId.TEMP_TABLE_NAMING.value

    @property
    def name(self) -> str:
        return "Temp Table Naming"

    @property
    def description(self) -> str:
        return (
            "Tables created as TEMPORARY, or created and dropped within the same "
            "script, must carry the temp_ name prefix."
        )

    def check(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> RuleResult:
        """Check temporary and create-then-drop table names."""
        prefix = config.temp_prefix.lower()

        if statement.contains("create temporary table"):
            table_name = statement.next_word("create temporary table")
            if table_name is not None and not table_name.lower().startswith(prefix):
                return self._fail(
                    details={"pattern": "temporary_table", "table": table_name},
                )

        script = context.get("script")
        if not isinstance(script, StatementText) or not statement.contains("create table"):
            return self._pass()

        table_name = statement.next_word("create table")
        if table_name is None:
            return self._pass()

        if script.contains(f"drop table {table_name}") and not table_name.lower().startswith(
            prefix
        ):
            return self._fail(
                details={"pattern": "dropped_in_script", "table": table_name},
            )

        return self._pass()


# Register the rule
RuleRegistry.get_instance().register(TempTableNamingRule())
