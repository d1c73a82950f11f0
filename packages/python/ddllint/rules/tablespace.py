"""Rules requiring an allowed tablespace on CREATE TABLE / CREATE INDEX."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from .base import Rule, RuleResult
from .catalog import RuleId
from .registry import RuleRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..config import LintConfig
    from ..statement import StatementText


class _TablespaceRule(Rule):
    """Shared check: a ``keyword`` statement must name an allowed tablespace.

    The allow-list is matched against the whole statement, not only the
    TABLESPACE clause, so an allowed name appearing anywhere passes.
    """

    keyword: str

    @abstractmethod
    def _allowed(self, config: LintConfig) -> Sequence[str]:
        """Tablespaces accepted for this statement kind."""
        ...

    def check(
        self,
        statement: StatementText,
        config: LintConfig,
        **context: object,
    ) -> RuleResult:
        if not statement.contains(self.keyword):
            return self._pass()

        if not statement.contains("tablespace"):
            return self._fail(details={"pattern": "missing_tablespace"})

        allowed = self._allowed(config)
        if not statement.contains_any(allowed):
            return self._fail(
                details={"pattern": "tablespace_not_allowed", "allowed": list(allowed)},
            )

        return self._pass()


class CreateTableTablespaceRule(_TablespaceRule):
    """CREATE TABLE must be placed in one of the data tablespaces."""

    keyword = "create table"

    @property
    def rule_id(self) -> str:
        return RuleId.CREATE_TABLE_TABLESPACE.value

    @property
    def name(self) -> str:
        return "CREATE TABLE Tablespace"

    @property
    def description(self) -> str:
        return "CREATE TABLE statements must specify an allowed data tablespace."

    def _allowed(self, config: LintConfig) -> Sequence[str]:
        return config.table_tablespaces


class CreateIndexTablespaceRule(_TablespaceRule):
    """CREATE INDEX must be placed in one of the index tablespaces."""

    keyword = "create index"

    @property
    def rule_id(self) -> str:
        return RuleId.CREATE_INDEX_TABLESPACE.value

    @property
    def name(self) -> str:
        return "CREATE INDEX Tablespace"

    @property
    def description(self) -> str:
        return "CREATE INDEX statements must specify an allowed index tablespace."

    def _allowed(self, config: LintConfig) -> Sequence[str]:
        return config.index_tablespaces


# Register the rules
RuleRegistry.get_instance().register(CreateTableTablespaceRule())
RuleRegistry.get_instance().register(CreateIndexTablespaceRule())
