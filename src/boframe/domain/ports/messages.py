"""Message lookup protocol for rule failure texts.

Locale and namespace resolution are entirely up to the implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageLookupProtocol(Protocol):
    """Contract for message lookup."""

    def format(self, key: str, /, **params: object) -> str:
        """Produce the human-readable text for a message key.

        Args:
            key: Message key (e.g. "required").
            **params: Template parameters (e.g. label="Title").

        Returns:
            Formatted message. Empty string when the key is unknown.
        """
        ...
