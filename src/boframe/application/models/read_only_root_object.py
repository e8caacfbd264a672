"""Read-only root object: a standalone model that can only be fetched."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from boframe.application.models._object import ObjectModel
from boframe.domain.model.enums import ModelType


class ReadOnlyRootObject(ObjectModel):
    """Fetched model whose properties cannot be assigned."""

    model_type: ClassVar[ModelType] = ModelType.READ_ONLY_ROOT_OBJECT
    read_only_model: ClassVar[bool] = True

    @classmethod
    async def fetch(cls, criteria: Any = None, method: str | None = None) -> Self:
        """Load an instance. A denied fetch returns an empty instance.

        Args:
            criteria: Filter sent to the repository.
            method: Alternative repository method. None = default fetch.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
            AuthorizationError: Denied with the throwError behavior.
        """
        instance = cls()
        await instance._fetch(criteria, method)
        return instance
