"""Minimum and maximum value rules. Absent values are not checked."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boframe.application.common_rules._messages import default_message
from boframe.application.rules.validation_rule import ValidationRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult
    from boframe.domain.model.property_info import PropertyInfo


class MinValueRule(ValidationRule):
    """Fails when the value is less than a minimum."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        min_value: Any,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the smallest accepted value."""
        super().__init__("MinValue")
        if min_value is None:
            raise ValueError("min_value must not be None")
        self.min_value = min_value
        self.initialize(
            primary_property,
            default_message("minValue", primary_property, min_value=min_value)
            if message is None
            else message,
            priority,
            stops_processing,
        )

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when a present value is below the minimum."""
        value = inputs[self.primary_property.name]
        if self.primary_property.has_value(value) and value < self.min_value:
            return self.result()
        return None


class MaxValueRule(ValidationRule):
    """Fails when the value is greater than a maximum."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        max_value: Any,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the largest accepted value."""
        super().__init__("MaxValue")
        if max_value is None:
            raise ValueError("max_value must not be None")
        self.max_value = max_value
        self.initialize(
            primary_property,
            default_message("maxValue", primary_property, max_value=max_value)
            if message is None
            else message,
            priority,
            stops_processing,
        )

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when a present value is above the maximum."""
        value = inputs[self.primary_property.name]
        if self.primary_property.has_value(value) and value > self.max_value:
            return self.result()
        return None
