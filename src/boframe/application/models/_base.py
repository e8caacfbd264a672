"""Shared plumbing of every model kind.

A model class is produced by define() on one of the kind base classes.
The class carries an immutable ModelDefinition; instances carry only
their own state (values, broken rules, lifecycle).

Concurrent actions on one instance are a caller error: an instance runs at
most one remote action at a time and nothing serializes callers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from boframe.application.models.definition import ModelDefinition
from boframe.application.rules.broken_rule_list import BrokenRuleList
from boframe.application.rules.contexts import AuthorizationContext
from boframe.domain.exceptions import (
    ModelDefinitionError,
    PortalNotConfiguredError,
    ReadOnlyPropertyError,
    RemoteActionError,
    UnknownPropertyError,
)
from boframe.domain.model.broken_rules_response import BrokenRulesResponse
from boframe.domain.model.enums import AuthorizationAction, ModelType, RemoteAction
from boframe.domain.model.remote_request import RemoteRequest

if TYPE_CHECKING:
    from boframe.domain.model.broken_rules_output import BrokenRulesOutput
    from boframe.domain.model.configuration import Configuration
    from boframe.domain.model.property_info import PropertyInfo
    from boframe.domain.ports.remote import RemotePort

logger = logging.getLogger(__name__)


class ModelProperty:
    """Data descriptor exposing one declared property on model instances.

    Class access returns the PropertyInfo, so Book.title can be used in rules.
    """

    __slots__ = ("info",)

    def __init__(self, info: PropertyInfo) -> None:
        """Initialize for a property."""
        self.info = info

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        """Read through the instance's guarded reader."""
        if instance is None:
            return self.info
        return instance._read_property(self.info)

    def __set__(self, instance: Any, value: Any) -> None:
        """Write through the instance's guarded writer."""
        instance._write_property(self.info, value)

    def __delete__(self, instance: Any) -> None:
        """Refuse deletion."""
        raise ReadOnlyPropertyError(model_name=instance.model_name, property_name=self.info.name)


def derive_model_class[M: ModelBase](base: type[M], definition: ModelDefinition) -> type[M]:
    """Create the model class of a definition with one descriptor per property.

    Raises:
        ModelDefinitionError: Base already defined, or a property shadows a base attribute.
    """
    if base.definition is not None:
        raise ModelDefinitionError(
            model_name=definition.name,
            reason=f"{base.__name__} is already a defined model",
        )
    namespace: dict[str, Any] = {
        "definition": definition,
        "__module__": base.__module__,
        "__qualname__": definition.name,
        "__doc__": f"{definition.model_type.value} {definition.name}.",
    }
    for prop in definition.properties:
        if hasattr(base, prop.name):
            raise ModelDefinitionError(
                model_name=definition.name,
                reason=f"property '{prop.name}' shadows an attribute of {base.__name__}",
            )
        namespace[prop.name] = ModelProperty(prop)
    return type(definition.name, (base,), namespace)


def require_parent(model_name: str, parent: ModelBase | None) -> ModelBase:
    """Validate the parent of a child model. FAIL-FIRST."""
    if parent is None:
        raise ValueError(f"{model_name}: child models require a parent")
    return parent


class ModelBase(ABC):
    """Base of all model kinds.

    Concrete kinds must:
    1. Set `model_type` class attribute
    2. Offer define() producing a class bound to a ModelDefinition
    3. Implement the validation and data transfer methods
    """

    model_type: ClassVar[ModelType]
    definition: ClassVar[ModelDefinition | None] = None

    def __init__(self, parent: ModelBase | None = None) -> None:
        """Initialize instance state.

        Raises:
            TypeError: The class was not produced by define().
        """
        definition = type(self).definition
        if definition is None:
            raise TypeError(f"{type(self).__name__} is not a defined model, call define() first")
        self._parent = parent
        self._broken_rules = BrokenRuleList(definition.name)
        self._is_validated = False

    def __setattr__(self, name: str, value: Any) -> None:
        """Allow internal attributes and declared properties only."""
        if name.startswith("_") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
            return
        raise UnknownPropertyError(model_name=self.model_name, property_name=name)

    # =========================================================================
    # Identity
    # =========================================================================

    @property
    def model_name(self) -> str:
        """Get model name."""
        return self._definition.name

    @property
    def model_uri(self) -> str:
        """Get model address in the remote repository."""
        return self._definition.uri

    @property
    def parent(self) -> ModelBase | None:
        """Get owning model. None for roots."""
        return self._parent

    @property
    def _definition(self) -> ModelDefinition:
        """Get the definition (always set on instances)."""
        definition = type(self).definition
        assert definition is not None
        return definition

    @property
    def _config(self) -> Configuration:
        """Get configuration of the model."""
        return self._definition.config

    # =========================================================================
    # Validation and broken rules
    # =========================================================================

    @abstractmethod
    def check_rules(self) -> None:
        """Run every validation rule of the instance and its children."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Check the instance and its children for broken rules of severity error."""

    @abstractmethod
    def _attach_broken_rules(
        self,
        output: BrokenRulesOutput,
        name: str,
        namespace: str | None,
    ) -> None:
        """Add this child's broken rules to the parent's output under a property name."""

    # =========================================================================
    # Data transfer
    # =========================================================================

    @abstractmethod
    def to_dto(self) -> Any:
        """Build the data transfer object."""

    @abstractmethod
    def from_dto(self, dto: Any) -> None:
        """Load values from a data transfer object without touching the lifecycle."""

    # =========================================================================
    # Authorization
    # =========================================================================

    def _has_permission(self, action: AuthorizationAction, target_name: str | None = None) -> bool:
        """Run the authorization rules of an action for the acting user."""
        context = AuthorizationContext(
            action=action,
            target_name=target_name,
            user=self._config.user,
            broken_rules=self._broken_rules,
        )
        return self._definition.rules.has_permission(context)

    def _can_do(self, action: AuthorizationAction) -> bool:
        """Check an object-level action, logging denials."""
        if self._has_permission(action):
            return True
        logger.warning("%s: %s denied", self.model_name, action.value)
        return False

    def _can_execute(self, method: str) -> bool:
        """Check an alternative repository method, logging denials."""
        if self._has_permission(AuthorizationAction.EXECUTE_METHOD, method):
            return True
        logger.warning("%s: method %s denied", self.model_name, method)
        return False

    def _can_fetch(self, method: str | None) -> bool:
        """Check the fetch action or its alternative method."""
        if method is None:
            return self._can_do(AuthorizationAction.FETCH_OBJECT)
        return self._can_execute(method)

    # =========================================================================
    # Remote actions
    # =========================================================================

    def _require_portal(self) -> RemotePort:
        """Get the portal of the model.

        Raises:
            PortalNotConfiguredError: Configuration has no portal.
        """
        portal = self._config.portal
        if portal is None:
            raise PortalNotConfiguredError(self.model_name)
        return portal

    async def _invoke(
        self,
        portal: RemotePort,
        action: RemoteAction,
        payload: Any = None,
        method: str | None = None,
    ) -> Any:
        """Send one remote request and return its response payload."""
        request = RemoteRequest(
            action=action,
            model_name=self.model_name,
            model_uri=self.model_uri,
            method=method,
            payload=payload,
        )
        logger.debug("%s: %s %s", self.model_name, action.value, method or "")
        return await portal.invoke(request)

    def _wrap_error(self, action: RemoteAction, error: Exception) -> RemoteActionError:
        """Wrap a failure of a remote action with the model's identity."""
        logger.error(
            "%s %s: %s failed: %s",
            self.model_type.value,
            self.model_name,
            action.value,
            error,
        )
        return RemoteActionError(
            model_type=self.model_type.value,
            model_name=self.model_name,
            action=action.value,
            inner=error,
        )

    def __repr__(self) -> str:
        """Show kind and name."""
        return f"<{self.model_type.value} {self.model_name}>"


def build_response(
    model: ModelBase,
    output: BrokenRulesOutput | None,
    message: str | None,
) -> BrokenRulesResponse | None:
    """Wrap a broken-rules tree into a client response. None when the tree is None."""
    if output is None:
        return None
    return BrokenRulesResponse(
        message=message or model._definition.config.response_message,
        data=output,
    )
