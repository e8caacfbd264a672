"""Text length rules. Absent values are not checked; other values are measured as str."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boframe.application.common_rules._messages import default_message
from boframe.application.rules.validation_rule import ValidationRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult
    from boframe.domain.model.property_info import PropertyInfo


def _check_length(length: int, name: str) -> int:
    """Validate a length argument. FAIL-FIRST."""
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"{name} must be int, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"{name} must be >= 0, got {length}")
    return length


class _LengthRule(ValidationRule):
    """Shared measuring of length rules."""

    def _measure(self, inputs: Mapping[str, Any]) -> int | None:
        """Get the length of a present value, None for an absent one."""
        value = inputs[self.primary_property.name]
        if not self.primary_property.has_value(value):
            return None
        return len(str(value))


class MinLengthRule(_LengthRule):
    """Fails when the text is shorter than a minimum."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        length: int,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the shortest accepted length."""
        super().__init__("MinLength")
        self.length = _check_length(length, "length")
        if message is None:
            message = default_message("minLength", primary_property, length=length)
        self.initialize(primary_property, message, priority, stops_processing)

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when a present value is too short."""
        measured = self._measure(inputs)
        if measured is not None and measured < self.length:
            return self.result()
        return None


class MaxLengthRule(_LengthRule):
    """Fails when the text is longer than a maximum."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        length: int,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the longest accepted length."""
        super().__init__("MaxLength")
        self.length = _check_length(length, "length")
        if message is None:
            message = default_message("maxLength", primary_property, length=length)
        self.initialize(primary_property, message, priority, stops_processing)

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when a present value is too long."""
        measured = self._measure(inputs)
        if measured is not None and measured > self.length:
            return self.result()
        return None


class LengthIsRule(_LengthRule):
    """Fails when the text length differs from an exact length."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        length: int,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the required length."""
        super().__init__("LengthIs")
        self.length = _check_length(length, "length")
        if message is None:
            message = (
                default_message("lengthIs1", primary_property)
                if length == 1
                else default_message("lengthIs", primary_property, length=length)
            )
        self.initialize(primary_property, message, priority, stops_processing)

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when a present value has another length."""
        measured = self._measure(inputs)
        if measured is not None and measured != self.length:
            return self.result()
        return None
