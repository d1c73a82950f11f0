"""Rule engine that runs the catalog against individual statements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import LintConfig
from .exceptions import ConfigurationError
from .log import get_logger
from .result import RuleOutcome, StatementResult
from .rules import DEFAULT_CATALOG, get_registry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .rules import Rule, RuleDefinition, RuleRegistry
    from .statement import StatementText

logger = get_logger(__name__)


class RuleEngine:
    """Runs every catalog rule, in catalog order, against a statement.

    The catalog is resolved against the rule registry once, at construction.
    An entry without an evaluator is a configuration error and the engine
    refuses to be built; it is never reported as a statement failure.

    The engine keeps no per-script state. The whole script, needed by the
    temp-table rule, is passed to :meth:`evaluate` for each call.

    Example:
        engine = RuleEngine()
        script = StatementText(sql)
        for text in split_script(sql):
            result = engine.evaluate(StatementText(text), script=script)
            for outcome in result.outcomes:
                print(f"[{outcome.severity.value}] {outcome.message}")
    """

    def __init__(
        self,
        catalog: Sequence[RuleDefinition] = DEFAULT_CATALOG,
        config: LintConfig | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            catalog: Ordered rule definitions. Defaults to the built-in catalog.
            config: Lint configuration. If None, uses defaults.
            registry: Evaluator registry. Defaults to the global registry.

        Raises:
            ConfigurationError: If a catalog entry has no evaluator, appears
                twice, or the config names a rule missing from the catalog.
        """
        self.config = config or LintConfig()
        self._registry = registry if registry is not None else get_registry()
        self._catalog: tuple[RuleDefinition, ...] = tuple(catalog)
        self._rules: list[tuple[RuleDefinition, Rule]] = []
        self._load_rules()

    def _load_rules(self) -> None:
        """Pair each catalog entry with its evaluator."""
        seen: set[str] = set()
        for definition in self._catalog:
            rule_id = definition.rule_id
            if rule_id in seen:
                raise self._configuration_error(
                    f"Rule '{rule_id}' appears twice in the catalog.", rule_id
                )
            seen.add(rule_id)

            rule = self._registry.get(rule_id)
            if rule is None:
                raise self._configuration_error(
                    f"There is some issue with the configuration of rule: {rule_id}. "
                    "No evaluator is registered for it.",
                    rule_id,
                )
            self._rules.append((definition, rule))

        unknown = sorted(self.config.referenced_rules() - seen)
        if unknown:
            raise self._configuration_error(
                f"Unknown rule(s) in configuration: {', '.join(unknown)}.", unknown[0]
            )

        logger.debug("rules_loaded", rules=[d.rule_id for d, _ in self._rules])

    @staticmethod
    def _configuration_error(message: str, rule_id: str) -> ConfigurationError:
        logger.error("rule_configuration_error", rule_id=rule_id, message=message)
        return ConfigurationError(message, rule_id=rule_id)

    def evaluate(
        self,
        statement: StatementText,
        script: StatementText | None = None,
    ) -> StatementResult:
        """Run all applicable rules against one statement.

        Args:
            statement: The statement to check.
            script: The whole script the statement came from, for rules that
                look beyond the current statement.

        Returns:
            StatementResult with one outcome per failure, in catalog order.
        """
        outcomes: list[RuleOutcome] = []

        for definition, rule in self._rules:
            if not self.config.should_run_rule(definition):
                continue

            for failure in rule.check_all(statement, self.config, script=script):
                logger.debug(
                    "rule_failed",
                    rule_id=definition.rule_id,
                    severity=definition.severity.value,
                    details=failure.details,
                )
                outcomes.append(
                    RuleOutcome(
                        rule_id=definition.rule_id,
                        severity=definition.severity,
                        message=definition.message_for(failure.detail),
                    )
                )

        return StatementResult(statement=statement, outcomes=tuple(outcomes))

    @property
    def catalog(self) -> tuple[RuleDefinition, ...]:
        """The ordered rule definitions this engine runs."""
        return self._catalog

    def get_active_rules(self) -> list[RuleDefinition]:
        """Get only the catalog entries that would actually run."""
        return [d for d, _ in self._rules if self.config.should_run_rule(d)]
