"""Rule registry mapping rule identifiers to evaluators."""

from __future__ import annotations

from .base import Rule


class RuleRegistry:
    """Central registry of rule evaluators.

    Rules are registered automatically when their modules are imported.
    The engine looks evaluators up by the ``rule_id`` of each catalog entry.

    Example:
        registry = RuleRegistry()
        registry.register(DoubleQuotesRule())

        rule = registry.get("no-double-quotes")
    """

    _instance: RuleRegistry | None = None

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    @classmethod
    def get_instance(cls) -> RuleRegistry:
        """Get the singleton registry instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, rule: Rule) -> None:
        """Register a rule with the registry.

        Args:
            rule: The rule instance to register

        Raises:
            ValueError: If a rule with the same ID is already registered
        """
        if rule.rule_id in self._rules:
            raise ValueError(f"Rule '{rule.rule_id}' is already registered")
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> Rule | None:
        """Get a rule by its ID."""
        return self._rules.get(rule_id)

    def all(self) -> list[Rule]:
        """Get all registered rules."""
        return list(self._rules.values())

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules


def _ensure_rules_loaded() -> None:
    """Ensure all rule modules are imported and rules are registered."""
    from . import (  # noqa: F401
        constraints,
        quoting,
        tablespace,
        temp_tables,
    )


def get_registry() -> RuleRegistry:
    """Get the populated default registry."""
    _ensure_rules_loaded()
    return RuleRegistry.get_instance()


def get_all_rules() -> list[Rule]:
    """Get all registered rules."""
    return get_registry().all()
