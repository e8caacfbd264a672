"""Broken rules output: model-shaped tree of rule failures.

Tagged-variant tree. Each entry of a node is exactly one of:
    NoticeEntry: ordered notices of one property (leaf)
    ChildEntry: output of a singular child model
    CollectionEntry: outputs of collection items, keyed by zero-padded index

Built fresh on every get_broken_rules() call, never persisted.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from boframe.domain.model.broken_rule import RuleNotice

INDEX_WIDTH = 5
MAX_INDEX = 10**INDEX_WIDTH - 1


def format_index(index: int) -> str:
    """Format a collection index as a fixed-width 5-digit key.

    Raises:
        ValueError: Index outside 0..99999.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"index must be int, got {type(index).__name__}")
    if not 0 <= index <= MAX_INDEX:
        raise ValueError(f"index must be 0..{MAX_INDEX}, got {index}")
    return f"{index:0{INDEX_WIDTH}d}"


@dataclass(frozen=True, slots=True)
class NoticeEntry:
    """Leaf entry: notices of one property in recording order."""

    notices: tuple[RuleNotice, ...]

    @property
    def count(self) -> int:
        """Get number of notices."""
        return len(self.notices)

    def to_wire(self) -> list[dict[str, str]]:
        """Convert to the wire representation."""
        return [notice.to_dict() for notice in self.notices]


@dataclass(frozen=True, slots=True)
class ChildEntry:
    """Entry of a singular child model."""

    output: BrokenRulesOutput

    @property
    def count(self) -> int:
        """Get number of notices in the child tree."""
        return self.output.count

    def to_wire(self) -> dict[str, Any]:
        """Convert to the wire representation."""
        return self.output.to_dict()


@dataclass(frozen=True, slots=True)
class CollectionEntry:
    """Entry of a child collection: index key -> item output."""

    items: Mapping[str, BrokenRulesOutput]

    @property
    def count(self) -> int:
        """Get number of notices across all items."""
        return sum(item.count for item in self.items.values())

    def to_wire(self) -> dict[str, Any]:
        """Convert to the wire representation."""
        return {key: item.to_dict() for key, item in self.items.items()}


type OutputEntry = NoticeEntry | ChildEntry | CollectionEntry


class BrokenRulesOutput:
    """Tree node of broken rules, keyed by property name.

    Mutable while it is being assembled by its owner, then handed out.

    Attributes:
        index: Position of the owning item inside a collection. None otherwise.
    """

    __slots__ = ("_entries", "index")

    def __init__(self, index: int | None = None) -> None:
        """Initialize empty node.

        Args:
            index: Position of the owning item inside a collection.
        """
        if index is not None:
            format_index(index)
        self.index = index
        self._entries: dict[str, OutputEntry] = {}

    @property
    def entries(self) -> Mapping[str, OutputEntry]:
        """Get read-only view of the entries."""
        return MappingProxyType(self._entries)

    @property
    def length(self) -> int:
        """Get number of top-level entries."""
        return len(self._entries)

    @property
    def count(self) -> int:
        """Get total number of notices in the tree."""
        return sum(entry.count for entry in self._entries.values())

    def __len__(self) -> int:
        """Get number of top-level entries."""
        return len(self._entries)

    def __bool__(self) -> bool:
        """Node is truthy when it has at least one entry."""
        return bool(self._entries)

    def __contains__(self, name: object) -> bool:
        """Check if an entry exists."""
        return name in self._entries

    def __getitem__(self, name: str) -> OutputEntry:
        """Get entry by name."""
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        """Iterate entry names in insertion order."""
        return iter(self._entries)

    def add(self, name: str, notice: RuleNotice) -> None:
        """Append a notice to the leaf entry of a property.

        Raises:
            ValueError: Name already holds a child or collection entry.
        """
        existing = self._entries.get(name)
        match existing:
            case None:
                self._entries[name] = NoticeEntry(notices=(notice,))
            case NoticeEntry(notices=notices):
                self._entries[name] = NoticeEntry(notices=(*notices, notice))
            case _:
                raise ValueError(f"entry '{name}' is not a notice entry")

    def add_child(self, name: str, output: BrokenRulesOutput) -> None:
        """Add the output of a singular child model."""
        self._ensure_free(name)
        self._entries[name] = ChildEntry(output=output)

    def add_children(self, name: str, outputs: Iterable[BrokenRulesOutput]) -> None:
        """Add outputs of collection items, keyed by each output's index.

        Raises:
            ValueError: Output without index, or duplicate index.
        """
        self._ensure_free(name)
        items: dict[str, BrokenRulesOutput] = {}
        for output in outputs:
            if output.index is None:
                raise ValueError(f"item output of '{name}' has no index")
            key = format_index(output.index)
            if key in items:
                raise ValueError(f"duplicate item index {key} in '{name}'")
            items[key] = output
        self._entries[name] = CollectionEntry(items=MappingProxyType(items))

    def add_item(self, index: int, output: BrokenRulesOutput) -> None:
        """Add the output of an item of a root collection under its index key."""
        key = format_index(index)
        self._ensure_free(key)
        self._entries[key] = ChildEntry(output=output)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain nested mapping (the wire representation)."""
        return {name: entry.to_wire() for name, entry in self._entries.items()}

    def _ensure_free(self, name: str) -> None:
        """Refuse to overwrite an existing entry. FAIL-FIRST."""
        if name in self._entries:
            raise ValueError(f"entry '{name}' already exists")

    def __repr__(self) -> str:
        """Show index and entry names."""
        return f"BrokenRulesOutput(index={self.index!r}, entries={list(self._entries)!r})"
