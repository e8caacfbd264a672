"""Rule results: what a rule reports back to the rule manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from boframe.domain.model.broken_rule import BrokenRule
from boframe.domain.model.enums import RuleSeverity

if TYPE_CHECKING:
    from boframe.domain.model.property_info import PropertyInfo


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of one validation rule.

    Attributes:
        rule_name: Name of the rule.
        property_name: Primary property of the rule.
        message: Failure text.
        severity: SUCCESS results are not recorded.
        stops_processing: Halts further rules of the property.
        affected_properties: Properties to re-validate after this rule.
    """

    rule_name: str
    property_name: str
    message: str
    severity: RuleSeverity = RuleSeverity.ERROR
    stops_processing: bool = False
    affected_properties: tuple[PropertyInfo, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if nothing is to be recorded."""
        return self.severity is RuleSeverity.SUCCESS

    def to_broken_rule(self) -> BrokenRule:
        """Convert to a non-preserved broken rule."""
        return BrokenRule(
            rule_name=self.rule_name,
            property_name=self.property_name,
            message=self.message,
            severity=self.severity,
            stops_processing=self.stops_processing,
            is_preserved=False,
        )


@dataclass(frozen=True, slots=True)
class AuthorizationResult:
    """Outcome of one failing authorization rule.

    Attributes:
        rule_name: Name of the rule.
        property_name: Target property. Empty for object and method actions.
        message: Failure text.
        severity: Derived from the rule's no-access behavior.
        stops_processing: Halts further rules of the rule id.
    """

    rule_name: str
    property_name: str
    message: str
    severity: RuleSeverity = RuleSeverity.ERROR
    stops_processing: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.severity is RuleSeverity.SUCCESS:
            raise ValueError("authorization result severity must not be SUCCESS")

    def to_broken_rule(self) -> BrokenRule:
        """Convert to a preserved broken rule."""
        return BrokenRule(
            rule_name=self.rule_name,
            property_name=self.property_name,
            message=self.message,
            severity=self.severity,
            stops_processing=self.stops_processing,
            is_preserved=True,
        )
