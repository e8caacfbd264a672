"""Broken rules of one model instance."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boframe.domain.model.broken_rule import BrokenRule
from boframe.domain.model.broken_rules_output import BrokenRulesOutput
from boframe.domain.model.enums import RuleSeverity
from boframe.domain.model.property_info import PropertyInfo

if TYPE_CHECKING:
    from collections.abc import Iterator


class BrokenRuleList:
    """Records of failed rules, filed by property name.

    Object-level records (empty property name) are filed under the model name.
    Preserved records (authorization failures) survive clear().

    Attributes:
        model_name: Name of the owning model.
    """

    def __init__(self, model_name: str) -> None:
        """Initialize empty list for a model."""
        if not model_name:
            raise ValueError("model_name must not be empty")
        self.model_name = model_name
        self._items: dict[str, list[BrokenRule]] = {}

    def add(self, broken_rule: BrokenRule) -> None:
        """Record a broken rule.

        An identical preserved record is ignored, so repeated denied reads
        do not multiply notices.
        """
        if not isinstance(broken_rule, BrokenRule):
            raise TypeError(f"expected BrokenRule, got {type(broken_rule).__name__}")
        records = self._items.setdefault(broken_rule.property_name or self.model_name, [])
        if broken_rule.is_preserved and broken_rule in records:
            return
        records.append(broken_rule)

    def clear(self, prop: PropertyInfo | str | None = None) -> None:
        """Drop non-preserved records of one property, or of all when None."""
        if prop is None:
            names = list(self._items)
        else:
            names = [prop.name if isinstance(prop, PropertyInfo) else prop]
        for name in names:
            kept = [record for record in self._items.get(name, ()) if record.is_preserved]
            if kept:
                self._items[name] = kept
            else:
                self._items.pop(name, None)

    def clear_all(self) -> None:
        """Drop every record, preserved ones included."""
        self._items.clear()

    def is_valid(self) -> bool:
        """Check that no record has severity ERROR."""
        return not any(record.severity is RuleSeverity.ERROR for record in self)

    def get(self, name: str) -> tuple[BrokenRule, ...]:
        """Get records filed under a property name."""
        return tuple(self._items.get(name, ()))

    def output(self, namespace: str | None = None, index: int | None = None) -> BrokenRulesOutput:
        """Project the records into a broken-rules tree.

        Args:
            namespace: Prefix of fallback messages. None = no prefix.
            index: Position of the owning item inside a collection.

        Returns:
            Node with one notice entry per property name that has records.
        """
        output = BrokenRulesOutput(index)
        for name, records in self._items.items():
            for record in records:
                output.add(name, record.to_notice(self._fallback_message(namespace, name, record)))
        return output

    def _fallback_message(self, namespace: str | None, name: str, record: BrokenRule) -> str:
        """Build the message key shown when a record has no text."""
        key = f"{self.model_name}.{name}.{record.rule_name}"
        return f"{namespace}:{key}" if namespace else key

    def __iter__(self) -> Iterator[BrokenRule]:
        """Iterate all records."""
        for records in self._items.values():
            yield from records

    def __len__(self) -> int:
        """Get total number of records."""
        return sum(len(records) for records in self._items.values())

    def __bool__(self) -> bool:
        """List is truthy when it has at least one record."""
        return bool(self._items)
