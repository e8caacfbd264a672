"""Read-only child object: a read-only model owned by a parent model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

from boframe.application.models._base import require_parent
from boframe.application.models._object import ObjectModel
from boframe.domain.model.enums import ModelType

if TYPE_CHECKING:
    from boframe.application.models._base import ModelBase


class ReadOnlyChildObject(ObjectModel):
    """Model loaded from its slice of the parent's data."""

    model_type: ClassVar[ModelType] = ModelType.READ_ONLY_CHILD_OBJECT
    read_only_model: ClassVar[bool] = True

    @classmethod
    def empty(cls, parent: ModelBase) -> Self:
        """Build an empty instance."""
        return cls(require_parent(cls.__name__, parent))

    @classmethod
    async def load(cls, parent: ModelBase, data: Mapping[str, Any]) -> Self:
        """Build an instance from its slice of the parent's data."""
        instance = cls.empty(parent)
        await instance._load(data)
        return instance

    async def _load(self, data: Mapping[str, Any] | None) -> None:
        """Load data and children. None = nothing to load."""
        if data is None or not self._can_fetch(None):
            return
        self._load_data(data)
        await self._load_children(data)
