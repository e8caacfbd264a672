"""Broken rule record and its public notice."""

from __future__ import annotations

from dataclasses import dataclass

from boframe.domain.model.enums import RuleSeverity


@dataclass(frozen=True, slots=True)
class RuleNotice:
    """Public leaf of a broken-rules tree.

    Attributes:
        message: Human-readable failure text.
        severity: INFORMATION/WARNING/ERROR.
    """

    message: str
    severity: RuleSeverity

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.severity is RuleSeverity.SUCCESS:
            raise ValueError("notice severity must not be SUCCESS")

    def to_dict(self) -> dict[str, str]:
        """Convert to the wire representation."""
        return {"message": self.message, "severity": self.severity.value}


@dataclass(frozen=True, slots=True)
class BrokenRule:
    """Recorded failure of one rule on one model instance.

    Attributes:
        rule_name: Name of the failed rule.
        property_name: Property the failure belongs to. Empty = the object itself.
        message: Human-readable failure text (may be empty).
        severity: INFORMATION/WARNING/ERROR.
        stops_processing: The failure halted further rules of its key.
        is_preserved: Survives clear(). True for authorization failures.
    """

    rule_name: str
    property_name: str
    message: str
    severity: RuleSeverity = RuleSeverity.ERROR
    stops_processing: bool = False
    is_preserved: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if self.severity is RuleSeverity.SUCCESS:
            raise ValueError("broken rule severity must not be SUCCESS")

    def to_notice(self, fallback_message: str) -> RuleNotice:
        """Project to a public notice, substituting fallback for an empty message."""
        return RuleNotice(message=self.message or fallback_message, severity=self.severity)
