"""Built-in validation and authorization rules."""

from boframe.application.common_rules.dependency import DEPENDENCY_PRIORITY, DependencyRule
from boframe.application.common_rules.expression import ExpressionRule
from boframe.application.common_rules.information import INFORMATION_PRIORITY, InformationRule
from boframe.application.common_rules.length import LengthIsRule, MaxLengthRule, MinLengthRule
from boframe.application.common_rules.required import REQUIRED_PRIORITY, RequiredRule
from boframe.application.common_rules.roles import (
    IsInAllRolesRule,
    IsInAnyRoleRule,
    IsInRoleRule,
    IsNotInAnyRoleRule,
    IsNotInRoleRule,
)
from boframe.application.common_rules.value import MaxValueRule, MinValueRule

__all__ = [
    "DEPENDENCY_PRIORITY",
    "INFORMATION_PRIORITY",
    "REQUIRED_PRIORITY",
    "DependencyRule",
    "ExpressionRule",
    "InformationRule",
    "IsInAllRolesRule",
    "IsInAnyRoleRule",
    "IsInRoleRule",
    "IsNotInAnyRoleRule",
    "IsNotInRoleRule",
    "LengthIsRule",
    "MaxLengthRule",
    "MaxValueRule",
    "MinLengthRule",
    "MinValueRule",
    "RequiredRule",
]
