"""Dependency rule: re-validates other properties when its property is validated."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from boframe.application.common_rules._messages import default_message
from boframe.application.rules.validation_rule import ValidationRule
from boframe.domain.model.enums import RuleSeverity
from boframe.domain.model.property_info import PropertyInfo

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boframe.application.rules.results import ValidationResult

DEPENDENCY_PRIORITY = -100


class DependencyRule(ValidationRule):
    """Never fails; always reports its dependencies as affected properties."""

    def __init__(
        self,
        primary_property: PropertyInfo,
        dependencies: PropertyInfo | Iterable[PropertyInfo],
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Initialize with the dependent properties.

        Raises:
            ValueError: No dependency given.
        """
        super().__init__("Dependency")
        if isinstance(dependencies, PropertyInfo):
            dependencies = (dependencies,)
        dependencies = tuple(dependencies)
        if not dependencies:
            raise ValueError("dependencies must not be empty")
        for dependency in dependencies:
            self.add_affected_property(dependency)
        self.initialize(
            primary_property,
            default_message("dependency", primary_property) if message is None else message,
            DEPENDENCY_PRIORITY if priority is None else priority,
            stops_processing,
        )

    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Report success carrying the dependencies."""
        return self.result(severity=RuleSeverity.SUCCESS)
