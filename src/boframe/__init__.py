"""boframe - business objects with rules, lifecycle and broken-rule reporting."""

__version__ = "0.1.0"

from boframe.application.common_rules import (
    DependencyRule,
    ExpressionRule,
    InformationRule,
    IsInAllRolesRule,
    IsInAnyRoleRule,
    IsInRoleRule,
    IsNotInAnyRoleRule,
    IsNotInRoleRule,
    LengthIsRule,
    MaxLengthRule,
    MaxValueRule,
    MinLengthRule,
    MinValueRule,
    RequiredRule,
)
from boframe.application.models import (
    CommandObject,
    EditableChildCollection,
    EditableChildObject,
    EditableRootCollection,
    EditableRootObject,
    ReadOnlyChildCollection,
    ReadOnlyChildObject,
    ReadOnlyRootCollection,
    ReadOnlyRootObject,
)
from boframe.application.rules import AuthorizationRule, ValidationRule
from boframe.domain.model import (
    AuthorizationAction,
    Configuration,
    ModelState,
    NoAccessBehavior,
    NullResultOption,
    PropertyFlag,
    PropertyInfo,
    RuleSeverity,
    UserInfo,
)
from boframe.infrastructure import Boolean, DateTime, Decimal, Email, Integer, LocalPortal, Text

__all__ = [
    "AuthorizationAction",
    "AuthorizationRule",
    "Boolean",
    "CommandObject",
    "Configuration",
    "DateTime",
    "Decimal",
    "DependencyRule",
    "EditableChildCollection",
    "EditableChildObject",
    "EditableRootCollection",
    "EditableRootObject",
    "Email",
    "ExpressionRule",
    "InformationRule",
    "Integer",
    "IsInAllRolesRule",
    "IsInAnyRoleRule",
    "IsInRoleRule",
    "IsNotInAnyRoleRule",
    "IsNotInRoleRule",
    "LengthIsRule",
    "LocalPortal",
    "MaxLengthRule",
    "MaxValueRule",
    "MinLengthRule",
    "MinValueRule",
    "ModelState",
    "NoAccessBehavior",
    "NullResultOption",
    "PropertyFlag",
    "PropertyInfo",
    "ReadOnlyChildCollection",
    "ReadOnlyChildObject",
    "ReadOnlyRootCollection",
    "ReadOnlyRootObject",
    "RequiredRule",
    "RuleSeverity",
    "Text",
    "UserInfo",
    "ValidationRule",
    "__version__",
]
