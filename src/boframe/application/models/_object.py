"""Shared behavior of object models (roots, children and commands)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

from boframe.application.models._base import ModelBase, build_response, derive_model_class
from boframe.application.models.definition import build_object_definition
from boframe.application.models.property_context import PropertyContext
from boframe.application.models.property_store import PropertyStore
from boframe.application.rules.contexts import ValidationContext
from boframe.domain.exceptions import ReadOnlyPropertyError
from boframe.domain.model.enums import AuthorizationAction, RemoteAction

if TYPE_CHECKING:
    from boframe.application.rules._base import Rule
    from boframe.domain.model.broken_rules_output import BrokenRulesOutput
    from boframe.domain.model.broken_rules_response import BrokenRulesResponse
    from boframe.domain.model.configuration import Configuration
    from boframe.domain.model.property_info import PropertyInfo

logger = logging.getLogger(__name__)


class ObjectModel(ModelBase):
    """Model with declared properties, rules and child models.

    Each child property holds a fixed child instance created with its owner.
    """

    # True for kinds whose data properties cannot be assigned
    read_only_model: ClassVar[bool] = False

    def __init__(self, parent: ModelBase | None = None) -> None:
        """Initialize store with empty values and empty child instances."""
        super().__init__(parent)
        self._store = PropertyStore(self.model_name)
        for prop in self._definition.properties:
            if prop.is_child:
                self._store.init_value(prop, prop.type.empty(self))
            else:
                self._store.init_value(prop)

    @classmethod
    def define(
        cls,
        name: str,
        *,
        properties: Iterable[PropertyInfo] = (),
        rules: Iterable[Rule] = (),
        config: Configuration | None = None,
    ) -> type[Self]:
        """Define a model of this kind.

        Args:
            name: Model name, optionally "Name:uri" to set the repository address.
            properties: Declared properties in declaration order.
            rules: Validation and authorization rules.
            config: Configuration. None = defaults.

        Returns:
            New model class exposing one attribute per property.

        Raises:
            ModelDefinitionError: Invalid properties or rules.
            InvalidChildTypeError: Child property of a kind this model cannot own.
        """
        definition = build_object_definition(cls.model_type, name, properties, rules, config)
        return derive_model_class(cls, definition)

    # =========================================================================
    # Property access
    # =========================================================================

    def _read_property(self, prop: PropertyInfo) -> Any:
        """Read a property. Denied reads give None."""
        if not self._has_permission(AuthorizationAction.READ_PROPERTY, prop.name):
            return None
        if prop.reader is not None:
            return prop.reader(self._property_context(prop))
        return self._store.get_value(prop)

    def _write_property(self, prop: PropertyInfo, value: Any) -> None:
        """Write a property. Denied writes are silently ignored.

        Raises:
            ReadOnlyPropertyError: Read-only property or read-only model.
            ModelTransitionError: Instance state refuses data changes.
        """
        if prop.is_read_only or self.read_only_model:
            raise ReadOnlyPropertyError(model_name=self.model_name, property_name=prop.name)
        self._check_writable()
        if not self._has_permission(AuthorizationAction.WRITE_PROPERTY, prop.name):
            return
        if prop.writer is not None:
            changed = bool(prop.writer(self._property_context(prop), value))
        else:
            changed = self._store.set_value(prop, value)
        if changed:
            self._property_changed(prop)

    def _check_writable(self) -> None:
        """Refuse writes the instance cannot take. Models without a lifecycle take any."""

    def _property_changed(self, prop: PropertyInfo) -> None:
        """React to an accepted value change."""
        self._is_validated = False

    def _property_context(self, prop: PropertyInfo) -> PropertyContext:
        """Build the store-level context of a custom reader or writer."""
        return PropertyContext(prop, self._definition.properties, self._store)

    def has_valid_value(self, name: str) -> bool:
        """Check if the last assignment of a property produced a well-typed value.

        Raises:
            UnknownPropertyError: Not declared.
        """
        return self._store.has_valid_value(self._definition.properties.get(name))

    def _children(self) -> list[ModelBase]:
        """Get child instances in declaration order."""
        child_properties = self._definition.properties.child_properties()
        return [self._store.get_value(prop) for prop in child_properties]

    # =========================================================================
    # Validation and broken rules
    # =========================================================================

    def _validation_value(self, prop: PropertyInfo) -> Any:
        """Read a value for the rules; ill-typed values read as None."""
        if not prop.is_child and not self._store.has_valid_value(prop):
            return None
        return self._store.get_value(prop)

    def check_rules(self) -> None:
        """Run every validation rule of the instance and its children.

        Preserved records (authorization failures) survive.
        """
        self._broken_rules.clear()
        context = ValidationContext(self._validation_value, self._broken_rules)
        for prop in self._definition.properties:
            self._definition.rules.validate(prop, context)
        for child in self._children():
            child.check_rules()
        self._is_validated = True

    def is_valid(self) -> bool:
        """Check the instance and its children, validating first when needed."""
        if not self._is_validated:
            self.check_rules()
        return self._broken_rules.is_valid() and all(child.is_valid() for child in self._children())

    def get_broken_rules(self, namespace: str | None = None) -> BrokenRulesOutput | None:
        """Collect broken rules of the instance and its children.

        Args:
            namespace: Prefix of fallback messages. None = no prefix.

        Returns:
            Broken-rules tree, or None when nothing is broken.
        """
        output = self._collect_broken_rules(namespace)
        return output if output else None

    def get_response(
        self,
        message: str | None = None,
        namespace: str | None = None,
    ) -> BrokenRulesResponse | None:
        """Wrap the broken rules into a client response. None when nothing is broken."""
        return build_response(self, self.get_broken_rules(namespace), message)

    def _collect_broken_rules(
        self,
        namespace: str | None,
        index: int | None = None,
    ) -> BrokenRulesOutput:
        """Build the tree of the instance, possibly empty."""
        output = self._broken_rules.output(namespace, index)
        for prop in self._definition.properties.child_properties():
            self._store.get_value(prop)._attach_broken_rules(output, prop.name, namespace)
        return output

    def _attach_broken_rules(
        self,
        output: BrokenRulesOutput,
        name: str,
        namespace: str | None,
    ) -> None:
        """Add own tree as a child entry when not empty."""
        child_output = self.get_broken_rules(namespace)
        if child_output is not None:
            output.add_child(name, child_output)

    # =========================================================================
    # Data transfer
    # =========================================================================

    def to_dto(self) -> dict[str, Any]:
        """Build the data transfer object of the instance and its children."""
        dto: dict[str, Any] = {}
        for prop in self._definition.properties:
            if prop.is_child:
                dto[prop.name] = self._store.get_value(prop).to_dto()
            elif prop.is_on_dto:
                dto[prop.name] = self._store.get_value(prop)
        return dto

    def from_dto(self, dto: Mapping[str, Any]) -> None:
        """Load values of the instance and its children. Missing keys keep their value."""
        self._load_data(dto)
        for prop in self._definition.properties.child_properties():
            if prop.name in dto and dto[prop.name] is not None:
                self._store.get_value(prop).from_dto(dto[prop.name])

    def key_equals(self, data: Mapping[str, Any]) -> bool:
        """Check if the key properties match a data mapping.

        Models without key properties compare every data property on the DTO.
        """
        properties = self._definition.properties
        keys = properties.key_properties() or tuple(
            prop for prop in properties.data_properties() if prop.is_on_dto
        )
        return all(
            prop.name in data and self._store.get_value(prop) == prop.parse(data[prop.name])
            for prop in keys
        )

    def _key_dto(self) -> dict[str, Any]:
        """Build the filter identifying the instance in the repository."""
        keys = self._definition.properties.key_properties()
        if not keys:
            return self.to_dto()
        return {prop.name: self._store.get_value(prop) for prop in keys}

    def _load_data(self, dto: Mapping[str, Any]) -> None:
        """Store data property values of a DTO without lifecycle effects.

        Raises:
            TypeError: DTO is not a mapping.
        """
        if not isinstance(dto, Mapping):
            raise TypeError(f"{self.model_name}: DTO must be a mapping, got {type(dto).__name__}")
        for prop in self._definition.properties.data_properties():
            if prop.is_on_dto and prop.name in dto:
                self._store.set_value(prop, dto[prop.name])
        self._is_validated = False

    async def _load_children(self, dto: Mapping[str, Any]) -> None:
        """Load every child from its slice of a DTO, concurrently."""
        await asyncio.gather(
            *(
                self._store.get_value(prop)._load(dto.get(prop.name))
                for prop in self._definition.properties.child_properties()
            )
        )

    async def _fetch(self, criteria: Any, method: str | None) -> bool:
        """Fetch the instance and its children from the repository.

        Returns:
            False when the fetch was denied.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
        """
        if not self._can_fetch(method):
            return False
        portal = self._require_portal()
        try:
            dto = await self._invoke(portal, RemoteAction.FETCH, criteria, method)
            self._load_data(dto)
            await self._load_children(dto)
        except Exception as exc:
            raise self._wrap_error(RemoteAction.FETCH, exc) from exc
        return True
