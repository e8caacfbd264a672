"""Text data types."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Final

# local@domain.tld, letters-only top-level domain of two or more characters
EMAIL_PATTERN: Final = re.compile(r"^[a-zA-Z0-9_.-]+@[a-zA-Z0-9_.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True, slots=True)
class Text:
    """Free text. Non-string values are converted with str()."""

    def parse(self, value: Any) -> str | None:
        """Convert a value to text. None clears the property."""
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def has_value(self, value: Any) -> bool:
        """Text is present when not empty."""
        return isinstance(value, str) and len(value) > 0


@dataclass(frozen=True, slots=True)
class Email:
    """E-mail address. The empty string counts as no address."""

    def parse(self, value: Any) -> str | None:
        """Convert a value to an address.

        Raises:
            ValueError: Not an e-mail address.
        """
        if value is None:
            return None
        email = value if isinstance(value, str) else str(value)
        if not email:
            return None
        if not EMAIL_PATTERN.match(email):
            raise ValueError(f"not an e-mail address: {email!r}")
        return email

    def has_value(self, value: Any) -> bool:
        """An address is present when stored."""
        return value is not None
