"""Required rule: the only rule that fails on an absent value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boframe.application.common_rules._messages import default_message
from boframe.application.rules.validation_rule import ValidationRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult
    from boframe.domain.model.property_info import PropertyInfo

REQUIRED_PRIORITY = 50


class RequiredRule(ValidationRule):
    """Fails when the property has no value."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize for a property.

        Args:
            primary_property: Property that must have a value.
            message: Failure text. None = "<Label> is required".
            priority: Higher runs first. None = 50.
            stops_processing: A failure halts further rules of the property.
        """
        super().__init__("Required")
        self.initialize(
            primary_property,
            default_message("required", primary_property) if message is None else message,
            REQUIRED_PRIORITY if priority is None else priority,
            stops_processing,
        )

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when the value is absent."""
        if not self.primary_property.has_value(inputs[self.primary_property.name]):
            return self.result()
        return None
