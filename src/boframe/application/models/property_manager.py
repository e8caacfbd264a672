"""Ordered set of the property descriptors of one model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boframe.domain.exceptions import ModelDefinitionError, UnknownPropertyError
from boframe.domain.model.property_info import PropertyInfo

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class PropertyManager:
    """Properties of a model in declaration order, unique by name.

    Attributes:
        model_name: Name of the owning model (used in errors).
    """

    __slots__ = ("_properties", "model_name")

    def __init__(self, model_name: str, properties: Iterable[PropertyInfo] = ()) -> None:
        """Initialize with the declared properties.

        Raises:
            ModelDefinitionError: Duplicate property name.
            TypeError: Item is not a PropertyInfo.
        """
        self.model_name = model_name
        self._properties: dict[str, PropertyInfo] = {}
        for prop in properties:
            if not isinstance(prop, PropertyInfo):
                raise TypeError(f"expected PropertyInfo, got {type(prop).__name__}")
            if prop.name in self._properties:
                raise ModelDefinitionError(
                    model_name=model_name,
                    reason=f"duplicate property '{prop.name}'",
                )
            self._properties[prop.name] = prop

    def get(self, name: str) -> PropertyInfo:
        """Get property by name.

        Raises:
            UnknownPropertyError: Not declared.
        """
        try:
            return self._properties[name]
        except KeyError:
            raise UnknownPropertyError(model_name=self.model_name, property_name=name) from None

    def contains(self, prop: PropertyInfo) -> bool:
        """Check if this exact descriptor is declared."""
        return self._properties.get(prop.name) == prop

    def data_properties(self) -> tuple[PropertyInfo, ...]:
        """Get properties holding values."""
        return tuple(prop for prop in self if not prop.is_child)

    def child_properties(self) -> tuple[PropertyInfo, ...]:
        """Get properties holding child models."""
        return tuple(prop for prop in self if prop.is_child)

    def key_properties(self) -> tuple[PropertyInfo, ...]:
        """Get properties identifying an instance."""
        return tuple(prop for prop in self if prop.is_key)

    def names(self) -> tuple[str, ...]:
        """Get property names in declaration order."""
        return tuple(self._properties)

    def __contains__(self, name: object) -> bool:
        """Check if a name is declared."""
        return name in self._properties

    def __iter__(self) -> Iterator[PropertyInfo]:
        """Iterate properties in declaration order."""
        return iter(self._properties.values())

    def __len__(self) -> int:
        """Get number of properties."""
        return len(self._properties)
