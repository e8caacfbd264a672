"""Data type rule: claims the highest priority slot of every data property.

Type validity is tracked by the property store, not by this rule.
Its execute() never reports anything; has_valid_value() is the separate
"well-typed" signal, broken rules are the "rule-valid" one.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from boframe.application.rules.validation_rule import ValidationRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult
    from boframe.domain.model.property_info import PropertyInfo

DATA_TYPE_PRIORITY = sys.maxsize


class DataTypeRule(ValidationRule):
    """Placeholder rule of a data property's type."""

    def __init__(self, primary_property: PropertyInfo, message: str) -> None:
        """Initialize for a data property."""
        super().__init__("DataType")
        self.initialize(primary_property, message, DATA_TYPE_PRIORITY, True)

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Report nothing."""
        return None
