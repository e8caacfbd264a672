"""Framework configuration threaded to every model.

Passed explicitly to define(); never read from ambient state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from boframe.domain.model.enums import NoAccessBehavior
from boframe.domain.model.messages import DEFAULT_CATALOG
from boframe.domain.ports.messages import MessageLookupProtocol

if TYPE_CHECKING:
    from boframe.domain.ports.remote import RemotePort
    from boframe.domain.ports.user import UserProtocol, UserReader


@dataclass(frozen=True, slots=True)
class Configuration:
    """Model-wide settings.

    Immutable configuration object with FAIL-FIRST validation.
    None = feature not available.

    Attributes:
        no_access_behavior: Default behavior of authorization rules without their own.
        portal: Remote port used by root models. None = no remote actions.
        user_reader: Returns the acting user. None = anonymous.
        messages: Message lookup for built-in rule texts.
        invalid_message_key: Message key of the data type rule.
        response_message: Default summary of get_response().
    """

    no_access_behavior: NoAccessBehavior = NoAccessBehavior.SHOW_ERROR
    portal: RemotePort | None = None
    user_reader: UserReader | None = None
    messages: MessageLookupProtocol = field(default=DEFAULT_CATALOG)
    invalid_message_key: str = "dataType"
    response_message: str = "The business object has broken rules."

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.no_access_behavior, NoAccessBehavior):
            raise TypeError(
                "no_access_behavior must be NoAccessBehavior, "
                f"got {type(self.no_access_behavior).__name__}"
            )
        if self.portal is not None and not callable(getattr(self.portal, "invoke", None)):
            raise TypeError(
                f"portal must have an invoke() method, got {type(self.portal).__name__}"
            )
        if self.user_reader is not None and not callable(self.user_reader):
            raise TypeError("user_reader must be callable")
        if not isinstance(self.messages, MessageLookupProtocol):
            raise TypeError(
                f"messages must have a format() method, got {type(self.messages).__name__}"
            )
        if not self.invalid_message_key:
            raise ValueError("invalid_message_key must not be empty")
        if not self.response_message:
            raise ValueError("response_message must not be empty")

    @property
    def user(self) -> UserProtocol | None:
        """Resolve the acting user. None = anonymous."""
        if self.user_reader is None:
            return None
        return self.user_reader()

    def with_changes(self, **changes: Any) -> Configuration:
        """Create a copy with some settings replaced."""
        return replace(self, **changes)


DEFAULT_CONFIGURATION = Configuration()
