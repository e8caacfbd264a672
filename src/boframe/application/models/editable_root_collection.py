"""Editable root collection: a standalone list of editable child objects."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from boframe.application.models._collection import RootCollectionMixin
from boframe.application.models._editable import (
    EditableCollectionModel,
    EditableMixin,
    SavableMixin,
)
from boframe.application.models.lifecycle import Lifecycle
from boframe.domain.model.enums import ModelState, ModelType, RemoteAction

logger = logging.getLogger(__name__)


class EditableRootCollection(
    RootCollectionMixin,
    SavableMixin,
    EditableMixin,
    EditableCollectionModel,
):
    """Collection with its own lifecycle and round trips.

    Items are owned by the collection itself and report their changes to it.
    """

    model_type: ClassVar[ModelType] = ModelType.EDITABLE_ROOT_COLLECTION

    def __init__(self) -> None:
        """Initialize empty with a lifecycle."""
        super().__init__(None)
        self._lifecycle = Lifecycle(self.model_name)

    @classmethod
    def new(cls) -> Self:
        """Build an uninitialized collection without contacting the repository."""
        return cls()

    @classmethod
    async def create(cls) -> Self:
        """Build an empty collection initialized as new."""
        instance = cls()
        instance._lifecycle.mark_as_created()
        return instance

    @classmethod
    async def fetch(cls, criteria: Any = None, method: str | None = None) -> Self:
        """Load the items. A denied fetch returns an uninitialized collection.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
            AuthorizationError: Denied with the throwError behavior.
        """
        instance = cls()
        if await instance._fetch_items(criteria, method):
            instance._lifecycle.mark_as_pristine()
        return instance

    def remove(self) -> None:
        """Mark the collection and every item for removal. Removing twice does nothing."""
        if self._lifecycle.state is ModelState.REMOVED:
            return
        if self._lifecycle.mark_for_removal():
            self._cascade_removal()

    def _accept_changes(self) -> None:
        """Accept the collection and its remaining items as persisted."""
        super()._accept_changes()
        self._lifecycle.mark_as_pristine()

    def _mark_deleted(self) -> None:
        """Mark the collection and its items removed."""
        super()._mark_deleted()
        self._lifecycle.mark_as_removed()

    def _save_payload(self, action: RemoteAction) -> Any:
        """Build the payload of a save action. Removal sends every item."""
        if action is RemoteAction.REMOVE:
            return [item.to_dto() for item in self._items]
        return self.to_dto()
