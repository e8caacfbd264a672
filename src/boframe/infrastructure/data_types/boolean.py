"""Boolean data type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Boolean:
    """Truth value. The text "false" (any case) is False, other values use bool()."""

    def parse(self, value: Any) -> bool | None:
        """Convert a value to bool."""
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() == "false":
            return False
        return bool(value)

    def has_value(self, value: Any) -> bool:
        """A truth value is present when stored."""
        return value is not None
