"""Editable root object: a standalone editable model with its own round trips."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from boframe.application.models._editable import EditableObjectModel, SavableMixin
from boframe.domain.model.enums import ModelType, RemoteAction

logger = logging.getLogger(__name__)


class EditableRootObject(SavableMixin, EditableObjectModel):
    """Editable model at the top of an object graph.

    Example:
        Book = EditableRootObject.define(
            "Book:library/books",
            properties=[PropertyInfo("title", Text())],
            rules=[RequiredRule(title)],
        )
        book = await Book.create()
        book.title = "Dune"
        await book.save()
    """

    model_type: ClassVar[ModelType] = ModelType.EDITABLE_ROOT_OBJECT

    @classmethod
    def new(cls) -> Self:
        """Build an uninitialized instance without contacting the repository."""
        return cls()

    @classmethod
    async def create(cls) -> Self:
        """Initialize a new instance with the repository's default values.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
        """
        instance = cls()
        await instance._create()
        return instance

    @classmethod
    async def fetch(cls, criteria: Any = None, method: str | None = None) -> Self:
        """Load an existing instance. A denied fetch returns an uninitialized instance.

        Args:
            criteria: Filter sent to the repository.
            method: Alternative repository method. None = default fetch.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
            AuthorizationError: Denied with the throwError behavior.
        """
        instance = cls()
        if await instance._fetch(criteria, method):
            instance._lifecycle.mark_as_pristine()
        return instance

    async def _create(self) -> None:
        """Ask the repository for default values, then initialize children."""
        portal = self._require_portal()
        try:
            dto = await self._invoke(portal, RemoteAction.CREATE)
            if dto is not None:
                self._load_data(dto)
            await self._create_children()
        except Exception as exc:
            raise self._wrap_error(RemoteAction.CREATE, exc) from exc
        self._lifecycle.mark_as_created()
