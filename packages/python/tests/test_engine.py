"""Tests for the rule engine."""

import pytest

from ddllint import (
    DEFAULT_CATALOG,
    ConfigurationError,
    LintConfig,
    RuleDefinition,
    RuleEngine,
    RuleSeverity,
    StatementText,
)
from ddllint.rules import RuleRegistry
from ddllint.rules.quoting import DoubleQuotesRule


@pytest.fixture
def engine() -> RuleEngine:
    return RuleEngine()


class TestRuleEngineConfiguration:
    """Test catalog resolution at construction time."""

    def test_default_catalog_resolves(self, engine: RuleEngine) -> None:
        assert [d.rule_id for d in engine.get_active_rules()] == [
            d.rule_id for d in DEFAULT_CATALOG
        ]

    def test_unknown_catalog_rule_is_a_configuration_error(self) -> None:
        catalog = (
            *DEFAULT_CATALOG,
            RuleDefinition(
                rule_id="no-select-star",
                severity=RuleSeverity.ERROR,
                error_message="SELECT * is not allowed.",
                success_message="No SELECT *.",
            ),
        )
        with pytest.raises(ConfigurationError, match="no-select-star") as exc_info:
            RuleEngine(catalog=catalog)
        assert exc_info.value.rule_id == "no-select-star"

    def test_missing_evaluator_in_registry(self) -> None:
        registry = RuleRegistry()
        registry.register(DoubleQuotesRule())
        with pytest.raises(ConfigurationError) as exc_info:
            RuleEngine(registry=registry)
        assert exc_info.value.rule_id == "create-table-tablespace"

    def test_duplicate_catalog_entry(self) -> None:
        catalog = (DEFAULT_CATALOG[0], DEFAULT_CATALOG[0])
        with pytest.raises(ConfigurationError, match="twice"):
            RuleEngine(catalog=catalog)

    def test_unknown_rule_in_config(self) -> None:
        with pytest.raises(ConfigurationError, match="no-such-rule"):
            RuleEngine(config=LintConfig(disabled_rules={"no-such-rule"}))

    def test_enabled_rules_whitelist(self) -> None:
        engine = RuleEngine(config=LintConfig(enabled_rules={"no-double-quotes"}))
        assert [d.rule_id for d in engine.get_active_rules()] == ["no-double-quotes"]

    def test_disabled_config_runs_nothing(self) -> None:
        engine = RuleEngine(config=LintConfig(enabled=False))
        result = engine.evaluate(StatementText('CREATE TABLE "foo" (a int)'))
        assert result.passed


class TestRuleEngineEvaluate:
    """Test evaluation of a single statement."""

    def test_passing_statement_has_no_outcomes(self, engine: RuleEngine) -> None:
        result = engine.evaluate(StatementText("CREATE TABLE foo (a int) TABLESPACE ACCTDATA"))
        assert result.passed
        assert result.outcomes == ()
        assert result.success_message == (
            "All rules passed. CREATE TABLE foo (a int) TABLESPACE ACCTDATA"
        )

    def test_failure_uses_catalog_message_and_severity(self, engine: RuleEngine) -> None:
        result = engine.evaluate(StatementText("CREATE TABLE foo (a int)"))
        assert len(result.outcomes) == 1
        outcome = result.outcomes[0]
        assert outcome.rule_id == "create-table-tablespace"
        assert outcome.severity == RuleSeverity.ERROR
        assert outcome.message == "The tablespace is invalid."
        assert result.success_message is None

    def test_warning_severity_from_catalog(self, engine: RuleEngine) -> None:
        result = engine.evaluate(StatementText('CREATE TABLE "foo" (a int) TABLESPACE ACCTDATA'))
        assert [(o.rule_id, o.severity) for o in result.outcomes] == [
            ("no-double-quotes", RuleSeverity.WARNING)
        ]
        assert result.errors == []
        assert len(result.warnings) == 1

    def test_independent_failures_in_catalog_order(self, engine: RuleEngine) -> None:
        result = engine.evaluate(StatementText('CREATE TEMPORARY TABLE "widget" (a int)'))
        assert [o.rule_id for o in result.outcomes] == ["temp-table-naming", "no-double-quotes"]

    def test_evaluation_is_idempotent(self, engine: RuleEngine) -> None:
        stmt = StatementText('CREATE TABLE "foo" (a int)')
        assert engine.evaluate(stmt) == engine.evaluate(stmt)

    def test_constraint_detail_does_not_leak(self, engine: RuleEngine) -> None:
        """Detail is appended per failure, never accumulated into the catalog."""
        stmt = StatementText("ALTER TABLE orders ADD CONSTRAINT CK_amount CHECK (amount > 0)")
        first = engine.evaluate(stmt).outcomes
        second = engine.evaluate(stmt).outcomes
        assert first == second
        assert first[0].message == (
            "Invalid constraint name, please refer documentation for valid constraint names. "
            "Fails test for Check constraint, format should be CK_<TABLE_NAME>_<COLUMN_NAME>."
        )
        assert DEFAULT_CATALOG[4].error_message.endswith("valid constraint names.")

    def test_each_constraint_failure_is_an_outcome(self, engine: RuleEngine) -> None:
        stmt = StatementText(
            "ALTER TABLE t ADD CONSTRAINT CK_x CHECK (a > 0) "
            "ADD CONSTRAINT NN_y CHECK (b IS NOT NULL)"
        )
        outcomes = engine.evaluate(stmt).outcomes
        assert [o.rule_id for o in outcomes] == ["constraint-naming", "constraint-naming"]
        assert "Check constraint" in outcomes[0].message
        assert "NOT NULL constraint" in outcomes[1].message

    def test_script_context_is_per_call(self, engine: RuleEngine) -> None:
        stmt = StatementText("CREATE TABLE foo (a int) TABLESPACE ACCTDATA")
        dropping = StatementText("CREATE TABLE foo (a int) TABLESPACE ACCTDATA / DROP TABLE foo /")

        assert not engine.evaluate(stmt, script=dropping).passed
        assert engine.evaluate(stmt, script=StatementText(stmt.value)).passed
        assert engine.evaluate(stmt).passed

    def test_disabled_rule_is_skipped(self) -> None:
        engine = RuleEngine(config=LintConfig(disabled_rules={"create-table-tablespace"}))
        assert engine.evaluate(StatementText("CREATE TABLE foo (a int)")).passed

    def test_validator_exposes_its_engine(self) -> None:
        from ddllint import Validator

        validator = Validator(catalog=DEFAULT_CATALOG[:1])
        assert validator.engine.catalog == (DEFAULT_CATALOG[0],)
        result = validator.engine.evaluate(StatementText('CREATE TABLE "foo" (a int)'))
        assert [o.rule_id for o in result.outcomes] == ["create-table-tablespace"]
