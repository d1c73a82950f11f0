"""Lint rules for ddllint.

Architecture:
    - RuleId / RuleDefinition / DEFAULT_CATALOG: the ordered rule catalog
      (which rules run, their severity and messages)
    - Rule: Base class for evaluators, one per RuleId
    - RuleResult: Structured pass/fail value returned by an evaluator
    - RuleRegistry: Maps rule IDs to evaluator instances

Usage:
    from ddllint.rules import get_registry, DEFAULT_CATALOG

    registry = get_registry()
    for definition in DEFAULT_CATALOG:
        rule = registry.get(definition.rule_id)
        for failure in rule.check_all(statement, config, script=script):
            print(f"[{definition.severity}] {definition.message_for(failure.detail)}")
"""

from .base import Rule, RuleResult, RuleSeverity
from .catalog import DEFAULT_CATALOG, RuleDefinition, RuleId
from .registry import RuleRegistry, get_all_rules, get_registry

__all__ = [
    "DEFAULT_CATALOG",
    "Rule",
    "RuleDefinition",
    "RuleId",
    "RuleResult",
    "RuleSeverity",
    "RuleRegistry",
    "get_all_rules",
    "get_registry",
]
