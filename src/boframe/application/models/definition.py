"""Model definition: the immutable, shared part of a model.

Built once by define(); every instance of the model reads it, none changes it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from boframe.application.models.property_manager import PropertyManager
from boframe.application.rules.authorization_rule import AuthorizationRule
from boframe.application.rules.data_type_rule import DataTypeRule
from boframe.application.rules.rule_manager import RuleManager
from boframe.application.rules.validation_rule import ValidationRule
from boframe.domain.exceptions import InvalidChildTypeError, ModelDefinitionError
from boframe.domain.model.configuration import DEFAULT_CONFIGURATION, Configuration
from boframe.domain.model.enums import ModelType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from boframe.application.rules._base import Rule
    from boframe.domain.model.property_info import PropertyInfo

logger = logging.getLogger(__name__)

# Parent kind -> kinds its child properties may hold
ALLOWED_CHILD_TYPES: dict[ModelType, frozenset[ModelType]] = {
    ModelType.EDITABLE_ROOT_OBJECT: frozenset(
        {ModelType.EDITABLE_CHILD_OBJECT, ModelType.EDITABLE_CHILD_COLLECTION}
    ),
    ModelType.EDITABLE_CHILD_OBJECT: frozenset(
        {ModelType.EDITABLE_CHILD_OBJECT, ModelType.EDITABLE_CHILD_COLLECTION}
    ),
    ModelType.READ_ONLY_ROOT_OBJECT: frozenset(
        {ModelType.READ_ONLY_CHILD_OBJECT, ModelType.READ_ONLY_CHILD_COLLECTION}
    ),
    ModelType.READ_ONLY_CHILD_OBJECT: frozenset(
        {ModelType.READ_ONLY_CHILD_OBJECT, ModelType.READ_ONLY_CHILD_COLLECTION}
    ),
    ModelType.COMMAND_OBJECT: frozenset(
        {ModelType.READ_ONLY_CHILD_OBJECT, ModelType.READ_ONLY_CHILD_COLLECTION}
    ),
}

# Collection kind -> kind of its items
ITEM_TYPES: dict[ModelType, ModelType] = {
    ModelType.EDITABLE_ROOT_COLLECTION: ModelType.EDITABLE_CHILD_OBJECT,
    ModelType.EDITABLE_CHILD_COLLECTION: ModelType.EDITABLE_CHILD_OBJECT,
    ModelType.READ_ONLY_ROOT_COLLECTION: ModelType.READ_ONLY_CHILD_OBJECT,
    ModelType.READ_ONLY_CHILD_COLLECTION: ModelType.READ_ONLY_CHILD_OBJECT,
}


def parse_model_name(phrase: str) -> tuple[str, str]:
    """Split "Name:uri" into name and uri. Without a colon the uri is the name.

    Raises:
        ValueError: Empty name or uri, or a name that is not an identifier.
    """
    if not isinstance(phrase, str):
        raise TypeError(f"model name must be str, got {type(phrase).__name__}")
    name, _, uri = phrase.partition(":")
    name = name.strip()
    uri = uri.strip() or name
    if not name.isidentifier():
        raise ValueError(f"model name must be an identifier, got {name!r}")
    return name, uri


def model_type_of(candidate: Any) -> ModelType | None:
    """Get the kind of a defined model class, None for anything else."""
    definition = getattr(candidate, "definition", None)
    if isinstance(candidate, type) and isinstance(definition, ModelDefinition):
        return definition.model_type
    return None


@dataclass(frozen=True, slots=True)
class ModelDefinition:
    """Shared description of a model.

    Attributes:
        name: Model name.
        uri: Address of the model in the remote repository.
        model_type: Kind of the model.
        properties: Declared properties.
        rules: Initialized rule manager.
        config: Configuration threaded to every instance.
        item_type: Model class of the items (collections only).
    """

    name: str
    uri: str
    model_type: ModelType
    properties: PropertyManager
    rules: RuleManager
    config: Configuration
    item_type: type | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.isidentifier():
            raise ValueError(f"name must be an identifier, got {self.name!r}")
        if not self.uri:
            raise ValueError("uri must not be empty")
        if not self.rules.is_initialized:
            raise ValueError("rules must be initialized")
        if self.model_type.is_collection != (self.item_type is not None):
            raise ValueError("item_type is required for collections only")


def build_object_definition(
    model_type: ModelType,
    phrase: str,
    properties: Iterable[PropertyInfo],
    rules: Iterable[Rule],
    config: Configuration | None,
) -> ModelDefinition:
    """Build the definition of an object model.

    Verifies child kinds, adds a DataTypeRule per data property and
    initializes the rule manager once.

    Raises:
        ModelDefinitionError: Rule refers to an undeclared property.
        InvalidChildTypeError: Child property holds a kind the model cannot own.
        CyclicDependencyError: Affected properties form a cycle.
    """
    name, uri = parse_model_name(phrase)
    config = config or DEFAULT_CONFIGURATION
    manager = PropertyManager(name, properties)

    allowed = ALLOWED_CHILD_TYPES[model_type]
    for prop in manager.child_properties():
        child_type = model_type_of(prop.type)
        if child_type not in allowed:
            got = (
                child_type.value
                if child_type
                else getattr(prop.type, "__name__", repr(prop.type))
            )
            raise InvalidChildTypeError(
                model_name=name,
                property_name=prop.name,
                expected=" or ".join(sorted(kind.value for kind in allowed)),
                got=got,
            )

    rule_manager = RuleManager(name)
    for prop in manager.data_properties():
        message = config.messages.format(config.invalid_message_key, label=prop.display_name)
        rule_manager.add(DataTypeRule(prop, message))
    for rule in rules:
        _check_rule_targets(name, manager, rule)
        rule_manager.add(rule)
    rule_manager.initialize(config.no_access_behavior)

    logger.debug("Defined %s %s (%d properties)", model_type.value, name, len(manager))
    return ModelDefinition(
        name=name,
        uri=uri,
        model_type=model_type,
        properties=manager,
        rules=rule_manager,
        config=config,
    )


def build_collection_definition(
    model_type: ModelType,
    phrase: str,
    item_type: type,
    rules: Iterable[Rule],
    config: Configuration | None,
) -> ModelDefinition:
    """Build the definition of a collection model.

    Collections carry authorization rules only.

    Raises:
        InvalidChildTypeError: Item type is not the matching child object kind.
        ModelDefinitionError: Validation rule given.
    """
    name, uri = parse_model_name(phrase)
    config = config or DEFAULT_CONFIGURATION

    expected = ITEM_TYPES[model_type]
    got = model_type_of(item_type)
    if got is not expected:
        raise InvalidChildTypeError(
            model_name=name,
            property_name="item_type",
            expected=expected.value,
            got=got.value if got else getattr(item_type, "__name__", repr(item_type)),
        )

    rule_manager = RuleManager(name)
    for rule in rules:
        if not isinstance(rule, AuthorizationRule):
            raise ModelDefinitionError(
                model_name=name,
                reason=f"collections accept authorization rules only, got '{rule.rule_name}'",
            )
        rule_manager.add(rule)
    rule_manager.initialize(config.no_access_behavior)

    logger.debug("Defined %s %s of %s", model_type.value, name, got.value)
    return ModelDefinition(
        name=name,
        uri=uri,
        model_type=model_type,
        properties=PropertyManager(name),
        rules=rule_manager,
        config=config,
        item_type=item_type,
    )


def _check_rule_targets(model_name: str, properties: PropertyManager, rule: Rule) -> None:
    """Refuse rules bound to undeclared properties, or guarding child properties. FAIL-FIRST."""
    bound: list[PropertyInfo] = []
    if isinstance(rule, ValidationRule) and rule.is_initialized:
        bound.extend((rule.primary_property, *rule.input_properties, *rule.affected_properties))
    elif isinstance(rule, AuthorizationRule) and rule.action is not None:
        if rule.action.targets_property:
            bound.append(rule.target)  # type: ignore[arg-type]
    for prop in bound:
        if not properties.contains(prop):
            raise ModelDefinitionError(
                model_name=model_name,
                reason=f"rule '{rule.rule_name}' refers to undeclared property '{prop.name}'",
            )
        if isinstance(rule, AuthorizationRule) and prop.is_child:
            raise ModelDefinitionError(
                model_name=model_name,
                reason=f"rule '{rule.rule_name}' guards child property '{prop.name}'",
            )
