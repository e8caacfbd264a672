"""Regular expression rule."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from boframe.application.common_rules._messages import default_message
from boframe.application.rules.validation_rule import ValidationRule
from boframe.domain.model.enums import NullResultOption

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult
    from boframe.domain.model.property_info import PropertyInfo


class ExpressionRule(ValidationRule):
    """Fails when the text form of the value does not match a pattern.

    The pattern is searched, not anchored: use ^...$ for a full match.

    Attributes:
        regex: Compiled pattern.
        option: Outcome for an absent value.
    """

    def __init__(
        self,
        primary_property: PropertyInfo,
        regex: str | re.Pattern[str],
        option: NullResultOption = NullResultOption.RETURN_TRUE,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with a pattern and a null-result option."""
        super().__init__("Expression")
        if not isinstance(option, NullResultOption):
            raise TypeError(f"option must be NullResultOption, got {type(option).__name__}")
        self.regex = re.compile(regex) if isinstance(regex, str) else regex
        if not isinstance(self.regex, re.Pattern):
            raise TypeError(f"regex must be str or re.Pattern, got {type(regex).__name__}")
        self.option = option
        self.initialize(
            primary_property,
            default_message("expression", primary_property) if message is None else message,
            priority,
            stops_processing,
        )

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Fail when the value does not match."""
        value = inputs[self.primary_property.name]
        if value is None and self.option is NullResultOption.CONVERT_TO_EMPTY_STRING:
            value = ""

        if value is None:
            is_satisfied = self.option is NullResultOption.RETURN_TRUE
        else:
            is_satisfied = self.regex.search(str(value)) is not None

        return None if is_satisfied else self.result()
