"""Response sent to a client when a model has broken rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from boframe.domain.model.broken_rules_output import BrokenRulesOutput

RESPONSE_NAME = "BrokenRules"
RESPONSE_STATUS = 422  # Unprocessable Entity


@dataclass(frozen=True, slots=True)
class BrokenRulesResponse:
    """Client-facing summary of a broken-rules tree.

    Attributes:
        message: Summary text.
        data: The broken-rules tree.
        name: Response name, always "BrokenRules".
        status: HTTP-like status code, always 422.
    """

    message: str
    data: BrokenRulesOutput
    name: str = RESPONSE_NAME
    status: int = RESPONSE_STATUS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.data:
            raise ValueError("data must contain at least one entry")

    @property
    def count(self) -> int:
        """Get total number of notices."""
        return self.data.count

    @property
    def length(self) -> int:
        """Get number of top-level entries."""
        return self.data.length

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation."""
        return {
            "name": self.name,
            "status": self.status,
            "message": self.message,
            "data": self.data.to_dict(),
            "count": self.count,
            "length": self.length,
        }
