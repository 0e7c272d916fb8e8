"""RuleCatalog — the rule collection a command works against.

Rules are loaded lazily on first access, so ``--help`` and commands
that never touch rules do no file I/O.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rulepred.infrastructure.rule_source import load_rules

if TYPE_CHECKING:
    from rulepred.config.settings import RulePredSettings
    from rulepred.domain.rules import RuleModel


class RuleCatalog:
    """Read-only view of the rules named by the settings."""

    def __init__(self, settings: RulePredSettings) -> None:
        self.settings = settings
        self._rules: list[RuleModel] | None = None

    @classmethod
    def from_rules(cls, settings: RulePredSettings, rules: list[RuleModel]) -> RuleCatalog:
        """Build a catalog over an in-memory rule list."""
        catalog = cls(settings)
        catalog._rules = list(rules)
        return catalog

    @property
    def path(self) -> Path:
        return self.settings.resolve_rules_path()

    @property
    def rules(self) -> list[RuleModel]:
        """All rules, in file order.

        Raises:
            RuleSourceError: If the rule file is missing or invalid.
        """
        if self._rules is None:
            self._rules = load_rules(self.path)
        return self._rules
