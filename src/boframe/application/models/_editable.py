"""Lifecycle behavior shared by editable objects and editable root collections."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Self

from boframe.application.models._base import ModelBase
from boframe.application.models._collection import CollectionModel
from boframe.application.models._object import ObjectModel
from boframe.application.models.lifecycle import Lifecycle
from boframe.domain.model.enums import AuthorizationAction, ModelState, RemoteAction

if TYPE_CHECKING:
    from boframe.domain.model.property_info import PropertyInfo

logger = logging.getLogger(__name__)

# Remote action -> permission guarding it
SAVE_PERMISSIONS: dict[RemoteAction, AuthorizationAction] = {
    RemoteAction.INSERT: AuthorizationAction.CREATE_OBJECT,
    RemoteAction.UPDATE: AuthorizationAction.UPDATE_OBJECT,
    RemoteAction.REMOVE: AuthorizationAction.REMOVE_OBJECT,
}

# Lifecycle state -> remote action of save()
SAVE_ACTIONS: dict[ModelState, RemoteAction] = {
    ModelState.CREATED: RemoteAction.INSERT,
    ModelState.CHANGED: RemoteAction.UPDATE,
    ModelState.MARKED_FOR_REMOVAL: RemoteAction.REMOVE,
}


class EditableMixin:
    """State queries and change propagation over a Lifecycle.

    Hosts must be ModelBase subclasses that set `_lifecycle` in __init__.
    """

    _lifecycle: Lifecycle
    _is_validated: bool

    def get_model_state(self) -> ModelState | None:
        """Get lifecycle state. None before the first transition."""
        return self._lifecycle.state

    def is_new(self) -> bool:
        """Check if the instance was never saved."""
        return self._lifecycle.is_new

    def is_dirty(self) -> bool:
        """Check if the instance has anything to save."""
        return self._lifecycle.is_dirty

    def is_self_dirty(self) -> bool:
        """Check if the instance's own data changed."""
        return self._lifecycle.is_self_dirty

    def is_deleted(self) -> bool:
        """Check if the instance is removed or awaiting removal."""
        return self._lifecycle.is_deleted

    def child_has_changed(self) -> None:
        """Record a change of a descendant."""
        self._mark_as_changed(itself=False)

    def _mark_as_changed(self, *, itself: bool) -> None:
        """Move to changed and tell the parent."""
        if self._lifecycle.mark_as_changed(itself=itself):
            self._is_validated = False
            self._propagate_change()

    def _propagate_change(self) -> None:
        """Tell the parent about a change. Roots have nobody to tell."""


class SavableMixin:
    """save() and is_savable() of roots.

    Hosts implement to_dto(), from_dto(), _save_payload(), _accept_changes()
    and _mark_deleted().
    """

    async def save(self) -> Self:
        """Persist pending changes, dispatching on the lifecycle state.

        Invalid or denied saves leave the instance unchanged.

        Returns:
            The instance itself (state removed after a delete).

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
            AuthorizationError: Denied with the throwError behavior.
        """
        model: Any = self
        if not model.is_valid():
            logger.warning("%s: save refused, broken rules present", model.model_name)
            return self
        action = SAVE_ACTIONS.get(model.get_model_state())
        if action is None:
            logger.debug("%s: nothing to save", model.model_name)
            return self
        if not model._can_do(SAVE_PERMISSIONS[action]):
            return self

        portal = model._require_portal()
        try:
            response = await model._invoke(portal, action, model._save_payload(action))
            if response is not None and action is not RemoteAction.REMOVE:
                model.from_dto(response)
        except Exception as exc:
            raise model._wrap_error(action, exc) from exc

        if action is RemoteAction.REMOVE:
            model._mark_deleted()
        else:
            model._accept_changes()
        return self

    def is_savable(self) -> bool:
        """Check if save() would reach the repository."""
        model: Any = self
        if model.is_deleted():
            permission = AuthorizationAction.REMOVE_OBJECT
        elif model.is_new():
            permission = AuthorizationAction.CREATE_OBJECT
        else:
            permission = AuthorizationAction.UPDATE_OBJECT
        return model.is_dirty() and model._has_permission(permission) and model.is_valid()


class EditableObjectModel(EditableMixin, ObjectModel):
    """Object model with a lifecycle."""

    def __init__(self, parent: ModelBase | None = None) -> None:
        """Initialize values, children and the lifecycle."""
        super().__init__(parent)
        self._lifecycle = Lifecycle(self.model_name)

    def _check_writable(self) -> None:
        """Refuse writes to a removed instance before the value is stored.

        Raises:
            ModelTransitionError: Instance is removed.
        """
        self._lifecycle.check_change()

    def _property_changed(self, prop: PropertyInfo) -> None:
        """Mark the instance as changed by itself."""
        self._is_validated = False
        self._mark_as_changed(itself=True)

    def remove(self) -> None:
        """Mark the instance and its children for removal.

        Removing a removed instance does nothing. Only the instance itself
        tells its parent; removed descendants stay silent.

        Raises:
            ModelTransitionError: Instance was never initialized.
        """
        if self._remove():
            self._propagate_change()

    def _remove(self) -> bool:
        """Mark the instance and its children for removal without telling the parent."""
        if self._lifecycle.state is ModelState.REMOVED:
            return False
        if not self._lifecycle.mark_for_removal():
            return False
        for child in self._children():
            child._cascade_removal()  # type: ignore[attr-defined]
        return True

    def _cascade_removal(self) -> None:
        """Remove as part of the owner's removal. Uninitialized children stay as they are."""
        if self._lifecycle.state is not None:
            self._remove()

    async def _create_children(self) -> None:
        """Initialize child objects as new. Collections start empty."""
        children = [child for child in self._children() if isinstance(child, EditableObjectModel)]
        await asyncio.gather(*(child._create() for child in children))

    async def _create(self) -> None:
        """Initialize as new."""
        await self._create_children()
        if self._lifecycle.mark_as_created():
            self._propagate_change()

    def _accept_changes(self) -> None:
        """Adopt the saved graph as persisted."""
        if self._lifecycle.state is ModelState.MARKED_FOR_REMOVAL:
            self._lifecycle.mark_as_removed()
        elif self._lifecycle.state is not ModelState.REMOVED:
            self._lifecycle.mark_as_pristine()
        for child in self._children():
            child._accept_changes()  # type: ignore[attr-defined]

    def _mark_deleted(self) -> None:
        """Mark the graph removed after a successful delete."""
        if self._lifecycle.state in (ModelState.CREATED, ModelState.MARKED_FOR_REMOVAL):
            self._lifecycle.mark_as_removed()
        for child in self._children():
            child._mark_deleted()  # type: ignore[attr-defined]

    def _save_payload(self, action: RemoteAction) -> Any:
        """Build the payload of a save action."""
        return self._key_dto() if action is RemoteAction.REMOVE else self.to_dto()


class EditableCollectionModel(CollectionModel):
    """Collection of editable child objects.

    Deleted items stay in the list until the owning root is saved; they are
    left out of validation, broken rules and data transfer meanwhile.
    """

    def _is_live(self, item: Any) -> bool:
        """Skip deleted items."""
        return not item.is_deleted()

    async def create_item(self, index: int | None = None) -> Any:
        """Add a new item.

        Args:
            index: Insert position. None = append.

        Returns:
            The new item.
        """
        item = await self.item_type.create(self._item_parent)
        if index is None:
            self._items.append(item)
        else:
            self._items.insert(index, item)
        self._is_validated = False
        return item

    def _cascade_removal(self) -> None:
        """Remove every item."""
        for item in self._items:
            item._cascade_removal()

    def _accept_changes(self) -> None:
        """Accept every item as persisted, then expel the removed ones."""
        for item in self._items:
            item._accept_changes()
        self._items = [item for item in self._items if not item.is_deleted()]

    def _mark_deleted(self) -> None:
        """Mark every item removed after a successful delete."""
        for item in self._items:
            item._mark_deleted()
