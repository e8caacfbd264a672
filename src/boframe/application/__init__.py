"""Application layer of boframe.

Components:
- rules: Rule base classes, rule manager, broken rule list
- common_rules: Built-in validation and authorization rules
- models: Model kinds (editable, read-only, command) and their plumbing
- reporters: Output formatting of broken-rules responses (rich, JSON)
"""

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
from boframe.application.reporters import ConsoleReporter, JsonReporter
from boframe.application.rules import (
    AuthorizationRule,
    RuleManager,
    ValidationRule,
)

__all__ = [
    "AuthorizationRule",
    "CommandObject",
    "ConsoleReporter",
    "DependencyRule",
    "EditableChildCollection",
    "EditableChildObject",
    "EditableRootCollection",
    "EditableRootObject",
    "ExpressionRule",
    "InformationRule",
    "IsInAllRolesRule",
    "IsInAnyRoleRule",
    "IsInRoleRule",
    "IsNotInAnyRoleRule",
    "IsNotInRoleRule",
    "JsonReporter",
    "LengthIsRule",
    "MaxLengthRule",
    "MaxValueRule",
    "MinLengthRule",
    "MinValueRule",
    "ReadOnlyChildCollection",
    "ReadOnlyChildObject",
    "ReadOnlyRootCollection",
    "ReadOnlyRootObject",
    "RequiredRule",
    "RuleManager",
    "ValidationRule",
]
