"""Read-only child collection: read-only child objects owned by a parent object."""

from __future__ import annotations

from typing import ClassVar

from boframe.application.models._collection import ChildCollectionMixin, CollectionModel
from boframe.domain.model.enums import ModelType


class ReadOnlyChildCollection(ChildCollectionMixin, CollectionModel):
    """Items loaded from the parent's data."""

    model_type: ClassVar[ModelType] = ModelType.READ_ONLY_CHILD_COLLECTION
