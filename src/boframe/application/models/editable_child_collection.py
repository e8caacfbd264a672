"""Editable child collection: editable child objects owned by a parent object."""

from __future__ import annotations

from typing import ClassVar

from boframe.application.models._collection import ChildCollectionMixin
from boframe.application.models._editable import EditableCollectionModel
from boframe.domain.model.enums import ModelType


class EditableChildCollection(ChildCollectionMixin, EditableCollectionModel):
    """Items persisted together with the owning root.

    Items report their changes to the owning object, not to the collection.
    """

    model_type: ClassVar[ModelType] = ModelType.EDITABLE_CHILD_COLLECTION
