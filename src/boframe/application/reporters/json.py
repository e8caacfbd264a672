"""JSON reporter: BrokenRulesResponse -> JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boframe.domain.model.broken_rules_response import BrokenRulesResponse


class JsonReporter:
    """JSON reporter: outputs the wire representation of a response.

    Schema: {"name", "status", "message", "data", "count", "length"} with data
    shaped like the model.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, response: BrokenRulesResponse) -> str:
        """Format a response as JSON string.

        Args:
            response: Response to format.

        Returns:
            JSON string of the wire representation.
        """
        return json.dumps(response.to_dict(), indent=self._indent)
