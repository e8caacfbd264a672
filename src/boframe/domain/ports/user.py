"""User context protocol supplied to authorization rules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class UserProtocol(Protocol):
    """Opaque identity of the acting user."""

    def is_in_role(self, role: str) -> bool:
        """Check if the user belongs to the role."""
        ...


type UserReader = Callable[[], UserProtocol | None]
"""Callable returning the current user (None = anonymous)."""
