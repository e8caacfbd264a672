"""Editable child object: an editable model owned by a parent model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

from boframe.application.models._base import require_parent
from boframe.application.models._editable import EditableObjectModel
from boframe.domain.model.enums import ModelType

if TYPE_CHECKING:
    from boframe.application.models._base import ModelBase


class EditableChildObject(EditableObjectModel):
    """Editable model persisted together with its root.

    Child objects never call the repository: they are created empty,
    initialized as new, or loaded from their slice of the parent's data.
    """

    model_type: ClassVar[ModelType] = ModelType.EDITABLE_CHILD_OBJECT

    @classmethod
    def empty(cls, parent: ModelBase) -> Self:
        """Build an uninitialized instance."""
        return cls(require_parent(cls.__name__, parent))

    @classmethod
    async def create(cls, parent: ModelBase) -> Self:
        """Build an instance initialized as new."""
        instance = cls.empty(parent)
        await instance._create()
        return instance

    @classmethod
    async def load(cls, parent: ModelBase, data: Mapping[str, Any]) -> Self:
        """Build an instance from its slice of the parent's data."""
        instance = cls.empty(parent)
        await instance._load(data)
        return instance

    async def _load(self, data: Mapping[str, Any] | None) -> None:
        """Load data and children, then accept them as persisted. None = nothing to load."""
        if data is None or not self._can_fetch(None):
            return
        self._load_data(data)
        await self._load_children(data)
        self._lifecycle.mark_as_pristine()

    def _propagate_change(self) -> None:
        """Tell the parent."""
        self._parent.child_has_changed()  # type: ignore[union-attr]
