"""Domain model entities."""

# Rule records
from boframe.domain.model.broken_rule import BrokenRule, RuleNotice

# Broken rules tree
from boframe.domain.model.broken_rules_output import (
    BrokenRulesOutput,
    ChildEntry,
    CollectionEntry,
    NoticeEntry,
    OutputEntry,
    format_index,
)
from boframe.domain.model.broken_rules_response import BrokenRulesResponse

# Settings
from boframe.domain.model.configuration import DEFAULT_CONFIGURATION, Configuration
from boframe.domain.model.enums import (
    AuthorizationAction,
    ModelState,
    ModelType,
    NoAccessBehavior,
    NullResultOption,
    RemoteAction,
    RuleSeverity,
)
from boframe.domain.model.graph import DiGraph, detect_cycles
from boframe.domain.model.messages import DEFAULT_CATALOG, MessageCatalog

# Properties
from boframe.domain.model.property_info import PropertyFlag, PropertyInfo

# Collaborators
from boframe.domain.model.remote_request import RemoteRequest
from boframe.domain.model.user import UserInfo

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_CONFIGURATION",
    "AuthorizationAction",
    "BrokenRule",
    "BrokenRulesOutput",
    "BrokenRulesResponse",
    "ChildEntry",
    "CollectionEntry",
    "Configuration",
    "DiGraph",
    "MessageCatalog",
    "ModelState",
    "ModelType",
    "NoAccessBehavior",
    "NoticeEntry",
    "NullResultOption",
    "OutputEntry",
    "PropertyFlag",
    "PropertyInfo",
    "RemoteAction",
    "RemoteRequest",
    "RuleNotice",
    "RuleSeverity",
    "UserInfo",
    "detect_cycles",
    "format_index",
]
