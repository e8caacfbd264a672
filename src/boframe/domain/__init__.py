"""boframe domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, graphlib, collections.abc
"""

from boframe.domain.exceptions import (
    AuthorizationError,
    BoFrameError,
    CyclicDependencyError,
    InvalidChildTypeError,
    ModelDefinitionError,
    ModelTransitionError,
    PortalNotConfiguredError,
    ReadOnlyPropertyError,
    RemoteActionError,
    RuleNotInitializedError,
    UnknownPropertyError,
)

__all__ = [
    "AuthorizationError",
    "BoFrameError",
    "CyclicDependencyError",
    "InvalidChildTypeError",
    "ModelDefinitionError",
    "ModelTransitionError",
    "PortalNotConfiguredError",
    "ReadOnlyPropertyError",
    "RemoteActionError",
    "RuleNotInitializedError",
    "UnknownPropertyError",
]
