"""Rule registry: lookup by code or name, and enable/disable selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from aliasdoc.errors import UnknownRuleError
from aliasdoc.lint.rules import BUILTIN_RULES, LintRule


class RuleRegistry:
    """Registered rules, kept in code order."""

    def __init__(self, rules: Iterable[LintRule] = ()) -> None:
        self._rules: dict[str, LintRule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: LintRule) -> None:
        """Add rule, replacing any rule with the same code."""
        self._rules[rule.code.upper()] = rule

    def get(self, key: str) -> LintRule:
        """Look up a rule by code (``AD101``) or name (``unresolved-alias``).

        Raises:
            UnknownRuleError: If nothing matches.
        """
        normalized = key.strip()
        rule = self._rules.get(normalized.upper())
        if rule is not None:
            return rule
        for rule in self._rules.values():
            if rule.name == normalized.lower():
                return rule
        raise UnknownRuleError(key)

    def __iter__(self) -> Iterator[LintRule]:
        return iter(sorted(self._rules.values(), key=lambda rule: rule.code))

    def __len__(self) -> int:
        return len(self._rules)

    def select(self, enable: Iterable[str] = (), disable: Iterable[str] = ()) -> list[LintRule]:
        """Rules to run.

        With no enable list, every default-on rule runs. An explicit enable
        list runs exactly those rules. Disable always wins.

        Raises:
            UnknownRuleError: If any key in enable or disable is unknown.
        """
        enabled = [self.get(key) for key in enable]
        disabled = {self.get(key).code for key in disable}
        candidates = enabled if enabled else [rule for rule in self if rule.default_enabled]
        selected: list[LintRule] = []
        for rule in candidates:
            if rule.code not in disabled and rule not in selected:
                selected.append(rule)
        return sorted(selected, key=lambda rule: rule.code)


def default_rules() -> RuleRegistry:
    """Registry holding one instance of every built-in rule."""
    return RuleRegistry(rule_cls() for rule_cls in BUILTIN_RULES)
