"""Information rule: attaches an informational notice to a property."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boframe.application.rules.validation_rule import ValidationRule
from boframe.domain.model.enums import RuleSeverity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult
    from boframe.domain.model.property_info import PropertyInfo

INFORMATION_PRIORITY = 1


class InformationRule(ValidationRule):
    """Always reports its message with severity INFORMATION."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        message: str,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the notice text.

        Raises:
            ValueError: Empty message.
        """
        super().__init__("Information")
        if not isinstance(message, str) or not message:
            raise ValueError("message must not be empty")
        self.initialize(
            primary_property,
            message,
            INFORMATION_PRIORITY if priority is None else priority,
            stops_processing,
        )

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Report the notice."""
        return self.result(severity=RuleSeverity.INFORMATION)
