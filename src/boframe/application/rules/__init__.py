"""Rule engine: rules, rule lists, rule manager and broken rules."""

from boframe.application.rules._base import DEFAULT_PRIORITY, Rule
from boframe.application.rules.authorization_rule import (
    DEFAULT_AUTHORIZATION_PRIORITY,
    AuthorizationRule,
    make_rule_id,
)
from boframe.application.rules.broken_rule_list import BrokenRuleList
from boframe.application.rules.contexts import AuthorizationContext, ValidationContext
from boframe.application.rules.data_type_rule import DATA_TYPE_PRIORITY, DataTypeRule
from boframe.application.rules.results import AuthorizationResult, ValidationResult
from boframe.application.rules.rule_list import RuleList
from boframe.application.rules.rule_manager import RuleManager
from boframe.application.rules.validation_rule import ValidationRule

__all__ = [
    "DATA_TYPE_PRIORITY",
    "DEFAULT_AUTHORIZATION_PRIORITY",
    "DEFAULT_PRIORITY",
    "AuthorizationContext",
    "AuthorizationResult",
    "AuthorizationRule",
    "BrokenRuleList",
    "DataTypeRule",
    "Rule",
    "RuleList",
    "RuleManager",
    "ValidationContext",
    "ValidationResult",
    "ValidationRule",
    "make_rule_id",
]
