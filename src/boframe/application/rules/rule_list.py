"""Multi-map of rules ordered by priority."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boframe.application.rules._base import Rule

if TYPE_CHECKING:
    from collections.abc import Iterator


class RuleList[R: Rule]:
    """Key -> rules, sorted by descending priority after sort().

    Equal priorities keep insertion order (list.sort is stable).
    """

    def __init__(self) -> None:
        """Initialize empty list."""
        self._rules: dict[str, list[R]] = {}

    def add(self, key: str, rule: R) -> None:
        """Append a rule under a key."""
        if not key:
            raise ValueError("rule key must not be empty")
        self._rules.setdefault(key, []).append(rule)

    def get(self, key: str) -> tuple[R, ...]:
        """Get rules of a key in evaluation order."""
        return tuple(self._rules.get(key, ()))

    def sort(self) -> None:
        """Order every key's rules by descending priority, stable on ties."""
        for rules in self._rules.values():
            rules.sort(key=lambda rule: rule.priority, reverse=True)

    def keys(self) -> tuple[str, ...]:
        """Get keys in insertion order."""
        return tuple(self._rules)

    def all_rules(self) -> Iterator[R]:
        """Iterate every rule of every key."""
        for rules in self._rules.values():
            yield from rules

    def __contains__(self, key: object) -> bool:
        """Check if any rule is filed under a key."""
        return key in self._rules

    def __len__(self) -> int:
        """Get total number of rules."""
        return sum(len(rules) for rules in self._rules.values())
