"""Model kinds and their building blocks."""

from boframe.application.models._base import ModelBase, ModelProperty
from boframe.application.models._collection import CollectionModel
from boframe.application.models._object import ObjectModel
from boframe.application.models.command_object import CommandObject
from boframe.application.models.definition import ModelDefinition, parse_model_name
from boframe.application.models.editable_child_collection import EditableChildCollection
from boframe.application.models.editable_child_object import EditableChildObject
from boframe.application.models.editable_root_collection import EditableRootCollection
from boframe.application.models.editable_root_object import EditableRootObject
from boframe.application.models.lifecycle import TRANSITIONS, Lifecycle, resolve_transition
from boframe.application.models.property_context import PropertyContext
from boframe.application.models.property_manager import PropertyManager
from boframe.application.models.property_store import PropertyStore
from boframe.application.models.read_only_child_collection import ReadOnlyChildCollection
from boframe.application.models.read_only_child_object import ReadOnlyChildObject
from boframe.application.models.read_only_root_collection import ReadOnlyRootCollection
from boframe.application.models.read_only_root_object import ReadOnlyRootObject

__all__ = [
    "TRANSITIONS",
    "CollectionModel",
    "CommandObject",
    "EditableChildCollection",
    "EditableChildObject",
    "EditableRootCollection",
    "EditableRootObject",
    "Lifecycle",
    "ModelBase",
    "ModelDefinition",
    "ModelProperty",
    "ObjectModel",
    "PropertyContext",
    "PropertyManager",
    "PropertyStore",
    "ReadOnlyChildCollection",
    "ReadOnlyChildObject",
    "ReadOnlyRootCollection",
    "ReadOnlyRootObject",
    "parse_model_name",
    "resolve_transition",
]
