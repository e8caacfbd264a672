"""Rule manager: owns the rules of one model definition.

Lifecycle:
    1. add() every rule
    2. initialize() exactly once
    3. validate() / has_permission() from any number of instances

Rules and rule lists are read-only after initialize().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from boframe.application.rules.authorization_rule import AuthorizationRule
from boframe.application.rules.rule_list import RuleList
from boframe.application.rules.validation_rule import ValidationRule
from boframe.domain.exceptions import (
    CyclicDependencyError,
    ModelDefinitionError,
    RuleNotInitializedError,
)
from boframe.domain.model.graph import DiGraph, detect_cycles

if TYPE_CHECKING:
    from collections.abc import Iterable

    from boframe.application.rules._base import Rule
    from boframe.application.rules.contexts import AuthorizationContext, ValidationContext
    from boframe.domain.model.enums import NoAccessBehavior
    from boframe.domain.model.property_info import PropertyInfo

logger = logging.getLogger(__name__)


class RuleManager:
    """Validation and authorization rules of one model.

    Failure semantics:
        add()/initialize() misuse raises immediately (programmer error).
        validate()/has_permission() record failures as broken rules and never
        raise for rule content, except rules configured to THROW_ERROR.

    Attributes:
        model_name: Name of the owning model (used in errors).
    """

    def __init__(self, model_name: str, rules: Iterable[Rule] = ()) -> None:
        """Initialize with optional rules.

        Args:
            model_name: Name of the owning model.
            rules: Rules to add, in declaration order.
        """
        self.model_name = model_name
        self._validation_rules: RuleList[ValidationRule] = RuleList()
        self._authorization_rules: RuleList[AuthorizationRule] = RuleList()
        self._is_initialized = False
        for rule in rules:
            self.add(rule)

    @property
    def is_initialized(self) -> bool:
        """Check if initialize() ran."""
        return self._is_initialized

    def add(self, rule: Rule) -> None:
        """File a rule under its primary property name or its rule id.

        Raises:
            ModelDefinitionError: Manager already initialized.
            RuleNotInitializedError: Rule never ran initialize().
            TypeError: Not a validation or authorization rule.
        """
        if self._is_initialized:
            raise ModelDefinitionError(
                model_name=self.model_name,
                reason=f"cannot add rule '{rule.rule_name}' after initialization",
            )
        match rule:
            case ValidationRule():
                if not rule.is_initialized:
                    raise RuleNotInitializedError(rule.rule_name)
                self._validation_rules.add(rule.primary_property.name, rule)
            case AuthorizationRule():
                if not rule.is_initialized or rule.rule_id is None:
                    raise RuleNotInitializedError(rule.rule_name)
                self._authorization_rules.add(rule.rule_id, rule)
            case _:
                raise TypeError(
                    f"expected ValidationRule or AuthorizationRule, got {type(rule).__name__}"
                )

    def initialize(self, default_no_access_behavior: NoAccessBehavior) -> None:
        """Sort rules, apply the default no-access behavior, reject cycles.

        Args:
            default_no_access_behavior: Behavior of authorization rules without their own.

        Raises:
            ModelDefinitionError: Called more than once.
            CyclicDependencyError: Affected properties form a cycle.
        """
        if self._is_initialized:
            raise ModelDefinitionError(
                model_name=self.model_name,
                reason="rule manager is already initialized",
            )

        self._reject_cycles()
        self._validation_rules.sort()
        self._authorization_rules.sort()
        for rule in self._authorization_rules.all_rules():
            rule.apply_default_behavior(default_no_access_behavior)
        self._is_initialized = True

        logger.debug(
            "Initialized rules of %s: %d validation, %d authorization",
            self.model_name,
            len(self._validation_rules),
            len(self._authorization_rules),
        )

    def validation_rules(self, property_name: str) -> tuple[ValidationRule, ...]:
        """Get validation rules of a property in evaluation order."""
        return self._validation_rules.get(property_name)

    def authorization_rules(self, rule_id: str) -> tuple[AuthorizationRule, ...]:
        """Get authorization rules of a rule id in evaluation order."""
        return self._authorization_rules.get(rule_id)

    def validation_keys(self) -> tuple[str, ...]:
        """Get property names that have validation rules."""
        return self._validation_rules.keys()

    def authorization_keys(self) -> tuple[str, ...]:
        """Get rule ids that have authorization rules."""
        return self._authorization_rules.keys()

    def validate(self, prop: PropertyInfo, context: ValidationContext) -> None:
        """Run the validation rules of a property.

        Clears the property's non-preserved records first. Every property
        named in a result's affected list is validated as well (cascade);
        a result with stops_processing halts the property's remaining rules
        after its cascade.
        """
        context.broken_rules.clear(prop)

        for rule in self._validation_rules.get(prop.name):
            result = rule.execute(rule.get_input_values(context.get_value))
            if result is None:
                continue
            if not result.is_success:
                context.broken_rules.add(result.to_broken_rule())
            for affected in result.affected_properties:
                self.validate(affected, context)
            if result.stops_processing:
                break

    def has_permission(self, context: AuthorizationContext) -> bool:
        """Run the authorization rules of the context's rule id.

        Returns:
            True when every evaluated rule grants access.

        Raises:
            AuthorizationError: A failing rule is configured to THROW_ERROR.
        """
        is_permitted = True

        for rule in self._authorization_rules.get(context.rule_id):
            result = rule.execute(context.user)
            if result is None:
                continue
            context.broken_rules.add(result.to_broken_rule())
            is_permitted = False
            if result.stops_processing:
                break

        return is_permitted

    def _reject_cycles(self) -> None:
        """Raise if the affected-property graph is cyclic. FAIL-FIRST."""
        edges = [
            (rule.primary_property.name, affected.name)
            for rule in self._validation_rules.all_rules()
            for affected in rule.affected_properties
        ]
        cycles = detect_cycles(DiGraph.from_edges(edges))
        if cycles:
            raise CyclicDependencyError(model_name=self.model_name, properties=cycles[0])
