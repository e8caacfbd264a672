"""Evaluation contexts handed to the rule manager by a model instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from boframe.application.rules.authorization_rule import make_rule_id
from boframe.domain.model.enums import AuthorizationAction

if TYPE_CHECKING:
    from collections.abc import Callable

    from boframe.application.rules.broken_rule_list import BrokenRuleList
    from boframe.domain.model.property_info import PropertyInfo
    from boframe.domain.ports.user import UserProtocol


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs of one validation pass.

    Attributes:
        get_value: Reads a property value; invalid values read as None.
        broken_rules: Broken rule list of the instance.
    """

    get_value: Callable[[PropertyInfo], Any]
    broken_rules: BrokenRuleList


@dataclass(frozen=True, slots=True)
class AuthorizationContext:
    """Inputs of one permission check.

    Attributes:
        action: Guarded action.
        target_name: Property or method name. None for object actions.
        user: Acting user. None = anonymous.
        broken_rules: Broken rule list of the instance.
    """

    action: AuthorizationAction
    target_name: str | None
    user: UserProtocol | None
    broken_rules: BrokenRuleList

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.action, AuthorizationAction):
            raise TypeError(f"action must be AuthorizationAction, got {type(self.action).__name__}")
        needs_target = self.action.targets_property or self.action.targets_method
        if needs_target and not self.target_name:
            raise ValueError(f"{self.action.value} requires a target name")
        if not needs_target and self.target_name is not None:
            raise ValueError(f"{self.action.value} takes no target name")

    @property
    def rule_id(self) -> str:
        """Get authorization key of the action and target."""
        return make_rule_id(self.action, self.target_name)
