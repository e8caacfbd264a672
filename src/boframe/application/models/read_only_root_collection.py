"""Read-only root collection: a standalone list that can only be fetched."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from boframe.application.models._collection import CollectionModel, RootCollectionMixin
from boframe.domain.model.enums import ModelType


class ReadOnlyRootCollection(RootCollectionMixin, CollectionModel):
    """Fetched list of read-only child objects owned by the collection."""

    model_type: ClassVar[ModelType] = ModelType.READ_ONLY_ROOT_COLLECTION

    def __init__(self) -> None:
        """Initialize empty."""
        super().__init__(None)

    @classmethod
    async def fetch(cls, criteria: Any = None, method: str | None = None) -> Self:
        """Load the items. A denied fetch returns an empty collection.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
            AuthorizationError: Denied with the throwError behavior.
        """
        instance = cls()
        await instance._fetch_items(criteria, method)
        return instance
