"""Capability interfaces for custom property access.

Readers and writers are attached to a PropertyInfo when the model is
declared and are resolved once, never reassigned per instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from boframe.domain.model.property_info import PropertyInfo


class PropertyContextProtocol(Protocol):
    """Store-level access handed to custom readers and writers."""

    @property
    def primary_property(self) -> PropertyInfo:
        """Property being read or written."""
        ...

    def get_value(self, name: str) -> Any:
        """Read the stored value of a property of the same instance."""
        ...

    def set_value(self, name: str, value: Any) -> bool:
        """Store a value, returning True if the stored value changed."""
        ...


class Reader(Protocol):
    """Custom getter of a property."""

    def __call__(self, context: PropertyContextProtocol) -> Any:
        """Return the property value."""
        ...


class Writer(Protocol):
    """Custom setter of a property."""

    def __call__(self, context: PropertyContextProtocol, value: Any) -> bool:
        """Store the value, returning True if the instance changed."""
        ...
