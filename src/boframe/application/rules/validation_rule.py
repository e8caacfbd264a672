"""Validation rule base class."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from boframe.application.rules._base import Rule
from boframe.application.rules.results import ValidationResult
from boframe.domain.model.enums import RuleSeverity
from boframe.domain.model.property_info import PropertyInfo

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class ValidationRule(Rule):
    """Rule checking the value of one primary property.

    Example:
        class EvenRule(ValidationRule):
            def __init__(self, primary_property: PropertyInfo) -> None:
                super().__init__("Even")
                self.initialize(primary_property, f"{primary_property.display_name} must be even")

            def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
                value = inputs[self.primary_property.name]
                if value is not None and value % 2:
                    return self.result()
                return None
    """

    def __init__(self, rule_name: str) -> None:
        """Initialize with rule name."""
        super().__init__(rule_name)
        self._primary_property: PropertyInfo | None = None
        self._input_properties: list[PropertyInfo] = []
        self._affected_properties: list[PropertyInfo] = []

    @property
    def primary_property(self) -> PropertyInfo:
        """Get the property the rule is filed under.

        Raises:
            RuntimeError: Rule not initialized yet.
        """
        if self._primary_property is None:
            raise RuntimeError(f"rule '{self.rule_name}' has no primary property yet")
        return self._primary_property

    @property
    def input_properties(self) -> tuple[PropertyInfo, ...]:
        """Get additional properties the rule reads."""
        return tuple(self._input_properties)

    @property
    def affected_properties(self) -> tuple[PropertyInfo, ...]:
        """Get properties to re-validate after this rule runs."""
        return tuple(self._affected_properties)

    def initialize(
        self,
        primary_property: PropertyInfo,
        message: str,
        priority: int | None = None,
        stops_processing: bool = False,
    ) -> None:
        """Bind the rule to its primary property.

        Args:
            primary_property: Property whose value is checked.
            message: Failure text.
            priority: Higher runs first. None = default 10.
            stops_processing: A failure halts further rules of the property.

        Raises:
            TypeError: primary_property is not a PropertyInfo.
        """
        if not isinstance(primary_property, PropertyInfo):
            raise TypeError(
                f"primary_property must be PropertyInfo, got {type(primary_property).__name__}"
            )
        self._primary_property = primary_property
        self._initialize_base(message, priority, stops_processing)

    def add_input_property(self, prop: PropertyInfo) -> None:
        """Declare another property read by the rule."""
        if not isinstance(prop, PropertyInfo):
            raise TypeError(f"input property must be PropertyInfo, got {type(prop).__name__}")
        if prop not in self._input_properties:
            self._input_properties.append(prop)

    def add_affected_property(self, prop: PropertyInfo) -> None:
        """Declare a property to re-validate after this rule."""
        if not isinstance(prop, PropertyInfo):
            raise TypeError(f"affected property must be PropertyInfo, got {type(prop).__name__}")
        if prop not in self._affected_properties:
            self._affected_properties.append(prop)

    def get_input_values(self, get_value: Callable[[PropertyInfo], Any]) -> dict[str, Any]:
        """Collect the values of the primary and input properties by name."""
        inputs = {self.primary_property.name: get_value(self.primary_property)}
        for prop in self._input_properties:
            inputs[prop.name] = get_value(prop)
        return inputs

    @abstractmethod
    def execute(self, inputs: Mapping[str, Any]) -> ValidationResult | None:
        """Check the input values.

        Args:
            inputs: Property name -> value. Invalid or absent values are None.

        Returns:
            None when the rule holds, a result otherwise.
        """

    def result(
        self,
        message: str | None = None,
        severity: RuleSeverity = RuleSeverity.ERROR,
    ) -> ValidationResult:
        """Build the result of this rule.

        Args:
            message: Failure text. None = the rule's message.
            severity: Result severity.
        """
        return ValidationResult(
            rule_name=self.rule_name,
            property_name=self.primary_property.name,
            message=self.message if message is None else message,
            severity=severity,
            stops_processing=self.stops_processing,
            affected_properties=self.affected_properties,
        )
