"""Numeric data types."""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Integer:
    """Whole number. Integral floats and numeric strings are accepted."""

    def parse(self, value: Any) -> int | None:
        """Convert a value to int.

        Raises:
            ValueError: Not a whole number.
            TypeError: Unsupported Python type.
        """
        if value is None:
            return None
        if isinstance(value, bool):
            raise TypeError("booleans are not integers")
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"not a whole number: {value!r}")
            return int(value)
        if isinstance(value, (str, decimal.Decimal)):
            try:
                number = decimal.Decimal(value.strip()) if isinstance(value, str) else value
            except decimal.InvalidOperation as exc:
                raise ValueError(f"not a number: {value!r}") from exc
            if not number.is_finite() or number != number.to_integral_value():
                raise ValueError(f"not a whole number: {value!r}")
            return int(number)
        raise TypeError(f"expected a number, got {type(value).__name__}")

    def has_value(self, value: Any) -> bool:
        """A number is present when stored."""
        return value is not None


@dataclass(frozen=True, slots=True)
class Decimal:
    """Decimal number stored as decimal.Decimal."""

    def parse(self, value: Any) -> decimal.Decimal | None:
        """Convert a value to Decimal.

        Raises:
            ValueError: Not a finite number.
            TypeError: Unsupported Python type.
        """
        if value is None:
            return None
        if isinstance(value, bool):
            raise TypeError("booleans are not decimals")
        if not isinstance(value, (int, float, str, decimal.Decimal)):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        try:
            number = decimal.Decimal(value.strip() if isinstance(value, str) else str(value))
        except decimal.InvalidOperation as exc:
            raise ValueError(f"not a number: {value!r}") from exc
        if not number.is_finite():
            raise ValueError(f"not a finite number: {value!r}")
        return number

    def has_value(self, value: Any) -> bool:
        """A number is present when stored."""
        return value is not None
