"""Exception types raised by ddllint."""

from __future__ import annotations


class DdlLintError(Exception):
    """Base class for all ddllint errors."""


class ConfigurationError(DdlLintError):
    """The rule catalog or lint configuration is inconsistent.

    Raised when a catalog entry names a rule that has no evaluator, when a
    rule appears twice in the catalog, or when the configuration refers to
    an unknown rule. This is never a statement-level failure: it aborts the
    whole evaluation.
    """

    def __init__(self, message: str, rule_id: str | None = None) -> None:
        super().__init__(message)
        self.rule_id = rule_id
