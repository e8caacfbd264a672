"""Property descriptor of a business object model."""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from enum import Flag, auto
from typing import TYPE_CHECKING, Any

from boframe.domain.ports.data_type import DataTypeProtocol

if TYPE_CHECKING:
    from boframe.domain.ports.property_access import Reader, Writer


class PropertyFlag(Flag):
    """Property options, combinable with |."""

    NONE = 0
    READ_ONLY = auto()  # no writes through the property surface
    KEY = auto()  # identifies the instance
    PARENT_KEY = auto()  # links a child to its parent
    ON_CTO_ONLY = auto()  # client side only, never in DTOs
    ON_DTO_ONLY = auto()  # transferred, not shown to the client


@dataclass(frozen=True, slots=True)
class PropertyInfo:
    """Immutable descriptor of one model field or child relationship.

    Created once when a model is declared. Identity is by name within one model.

    Attributes:
        name: Property name (a public Python identifier).
        type: Data type instance, or a child model class.
        flags: Property options.
        reader: Custom getter. None = read the stored value.
        writer: Custom setter. None = write through the data type.
        label: Display name used in messages. None = derived from name.
    """

    name: str
    type: Any
    flags: PropertyFlag = PropertyFlag.NONE
    reader: Reader | None = None
    writer: Writer | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise ValueError(f"property name must be an identifier, got {self.name!r}")
        if self.name.startswith("_"):
            raise ValueError(f"property name must not start with '_', got {self.name!r}")
        if keyword.iskeyword(self.name):
            raise ValueError(f"property name must not be a keyword, got {self.name!r}")
        if not isinstance(self.flags, PropertyFlag):
            raise TypeError(f"flags must be PropertyFlag, got {type(self.flags).__name__}")
        if not isinstance(self.type, DataTypeProtocol) and not isinstance(self.type, type):
            raise TypeError(
                f"type of '{self.name}' must be a data type or a model class, "
                f"got {type(self.type).__name__}"
            )
        if self.is_child and self.writer is not None:
            raise ValueError(f"child property '{self.name}' cannot have a writer")
        if self.label is not None and not self.label:
            raise ValueError("label must not be empty")

    @property
    def is_child(self) -> bool:
        """Check if the property holds a child model."""
        return not isinstance(self.type, DataTypeProtocol)

    @property
    def is_read_only(self) -> bool:
        """Check if writes are refused. Child properties are always read-only."""
        return self.is_child or PropertyFlag.READ_ONLY in self.flags

    @property
    def is_key(self) -> bool:
        """Check if the property identifies the instance."""
        return PropertyFlag.KEY in self.flags

    @property
    def is_parent_key(self) -> bool:
        """Check if the property links to the parent."""
        return PropertyFlag.PARENT_KEY in self.flags

    @property
    def is_on_dto(self) -> bool:
        """Check if a data property is transferred in DTOs."""
        return not self.is_child and PropertyFlag.ON_CTO_ONLY not in self.flags

    @property
    def is_on_cto(self) -> bool:
        """Check if the property is visible to the client."""
        return PropertyFlag.ON_DTO_ONLY not in self.flags

    @property
    def display_name(self) -> str:
        """Human-readable name: label, or the name with its first letter capitalized."""
        if self.label is not None:
            return self.label
        words = self.name.replace("_", " ").strip()
        return words[:1].upper() + words[1:]

    def has_value(self, value: Any) -> bool:
        """Check if a value counts as present for this property."""
        if self.is_child:
            return value is not None
        return bool(self.type.has_value(value))

    def parse(self, value: Any) -> Any:
        """Parse a value through the data type.

        Raises:
            TypeError: Child properties hold instances, not parsed values.
        """
        if self.is_child:
            raise TypeError(f"child property '{self.name}' has no data type")
        return self.type.parse(value)
