"""Date and time data type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class DateTime:
    """Point in time. ISO 8601 strings and dates are converted to datetime."""

    def parse(self, value: Any) -> datetime | None:
        """Convert a value to datetime.

        Raises:
            ValueError: Malformed ISO 8601 string.
            TypeError: Unsupported Python type.
        """
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, str):
            return datetime.fromisoformat(value.strip())
        raise TypeError(f"expected datetime or ISO string, got {type(value).__name__}")

    def has_value(self, value: Any) -> bool:
        """A point in time is present when stored."""
        return value is not None
