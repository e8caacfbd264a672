"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from boframe.domain.model.broken_rules_response import BrokenRulesResponse


class ReporterProtocol(Protocol):
    """Protocol for broken-rules response reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, response: BrokenRulesResponse) -> str:
        """Format a response as string.

        Args:
            response: Response to format.

        Returns:
            Formatted string representation.
        """
        ...
