"""Data type protocol for model properties.

Users extend boframe by implementing this Protocol.
Built-in implementations live in boframe.infrastructure.data_types.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DataTypeProtocol(Protocol):
    """Contract for property data types.

    A data type converts raw assignments into stored values and decides
    whether a stored value counts as present.

    Example:
        @dataclass(frozen=True, slots=True)
        class Upper:
            def parse(self, value: Any) -> str | None:
                if value is None:
                    return None
                if not isinstance(value, str):
                    raise TypeError(f"expected str, got {type(value).__name__}")
                return value.upper()

            def has_value(self, value: Any) -> bool:
                return bool(value)
    """

    def parse(self, value: Any) -> Any:
        """Convert a raw value to the stored representation.

        Args:
            value: Value being assigned (None clears the property).

        Returns:
            Parsed value.

        Raises:
            ValueError: Value cannot be represented by this type.
            TypeError: Value has an unsupported Python type.
        """
        ...

    def has_value(self, value: Any) -> bool:
        """Check if a stored value counts as present."""
        ...
