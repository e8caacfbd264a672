"""Per-instance storage of property values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boframe.domain.exceptions import ReadOnlyPropertyError, UnknownPropertyError

if TYPE_CHECKING:
    from boframe.domain.model.property_info import PropertyInfo


class PropertyStore:
    """Maps each property to its value and a well-typed flag.

    set_value() is the sole change signal: True only when the stored value
    actually changed. Whether a value is well-typed is independent of
    whether any business rule considers it broken.

    Attributes:
        model_name: Name of the owning model (used in errors).
    """

    __slots__ = ("_valid", "_values", "model_name")

    def __init__(self, model_name: str) -> None:
        """Initialize empty store."""
        self.model_name = model_name
        self._values: dict[str, Any] = {}
        self._valid: dict[str, bool] = {}

    def init_value(self, prop: PropertyInfo, value: Any = None) -> None:
        """Seed a property and mark it valid.

        Args:
            prop: Property to seed.
            value: Initial value, or the child instance of a child property.
        """
        self._values[prop.name] = value
        self._valid[prop.name] = True

    def get_value(self, prop: PropertyInfo) -> Any:
        """Get the raw stored value.

        Raises:
            UnknownPropertyError: Property was never seeded.
        """
        self._ensure_known(prop)
        return self._values[prop.name]

    def set_value(self, prop: PropertyInfo, value: Any) -> bool:
        """Parse and store a value.

        Returns:
            True if the stored value changed. False when parsing failed
            (the property becomes invalid, the value is kept) or when the
            parsed value equals the stored one.

        Raises:
            UnknownPropertyError: Property was never seeded.
            ReadOnlyPropertyError: Child properties hold fixed instances.
        """
        self._ensure_known(prop)
        if prop.is_child:
            raise ReadOnlyPropertyError(model_name=self.model_name, property_name=prop.name)

        try:
            parsed = prop.parse(value)
        except (ValueError, TypeError):
            self._valid[prop.name] = False
            return False

        self._valid[prop.name] = True
        if parsed == self._values[prop.name] and type(parsed) is type(self._values[prop.name]):
            return False
        self._values[prop.name] = parsed
        return True

    def has_valid_value(self, prop: PropertyInfo) -> bool:
        """Check if the last assignment produced a well-typed value.

        Raises:
            UnknownPropertyError: Property was never seeded.
        """
        self._ensure_known(prop)
        return self._valid[prop.name]

    def __contains__(self, prop: object) -> bool:
        """Check if a property is seeded."""
        return getattr(prop, "name", None) in self._values

    def _ensure_known(self, prop: PropertyInfo) -> None:
        """Raise for a property that was never seeded. FAIL-FIRST."""
        if prop.name not in self._values:
            raise UnknownPropertyError(model_name=self.model_name, property_name=prop.name)
