"""Store-level property access handed to custom readers and writers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from boframe.application.models.property_manager import PropertyManager
    from boframe.application.models.property_store import PropertyStore
    from boframe.domain.model.property_info import PropertyInfo


class PropertyContext:
    """Reads and writes sibling properties of one instance, bypassing authorization.

    Attributes:
        primary_property: Property whose reader or writer is running.
    """

    __slots__ = ("_properties", "_store", "primary_property")

    def __init__(
        self,
        primary_property: PropertyInfo,
        properties: PropertyManager,
        store: PropertyStore,
    ) -> None:
        """Initialize for one property of one instance."""
        self.primary_property = primary_property
        self._properties = properties
        self._store = store

    def get_value(self, name: str) -> Any:
        """Get the stored value of a property.

        Raises:
            UnknownPropertyError: Not declared.
        """
        return self._store.get_value(self._properties.get(name))

    def set_value(self, name: str, value: Any) -> bool:
        """Store a value through the property's data type.

        Returns:
            True if the stored value changed.

        Raises:
            UnknownPropertyError: Not declared.
        """
        return self._store.set_value(self._properties.get(name), value)
