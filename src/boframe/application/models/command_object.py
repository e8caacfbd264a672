"""Command object: parameters sent to a repository method, results read back."""

from __future__ import annotations

import logging
from typing import ClassVar, Self

from boframe.application.models._object import ObjectModel
from boframe.domain.model.enums import AuthorizationAction, ModelType, RemoteAction

logger = logging.getLogger(__name__)


class CommandObject(ObjectModel):
    """Model without a lifecycle that runs a remote operation.

    Example:
        Rename = CommandObject.define(
            "RenameBook:library/books",
            properties=[PropertyInfo("title", Text()), PropertyInfo("done", Boolean())],
        )
        command = Rename.new()
        command.title = "Dune Messiah"
        await command.execute("rename")
    """

    model_type: ClassVar[ModelType] = ModelType.COMMAND_OBJECT

    @classmethod
    def new(cls) -> Self:
        """Build an instance with empty values."""
        return cls()

    async def execute(self, method: str | None = None) -> Self:
        """Send the values to the repository and load the response.

        A denied command returns the instance unchanged.

        Args:
            method: Repository method. None = default execute.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
            AuthorizationError: Denied with the throwError behavior.
        """
        if method is None:
            allowed = self._can_do(AuthorizationAction.EXECUTE_COMMAND)
        else:
            allowed = self._can_execute(method)
        if not allowed:
            return self

        portal = self._require_portal()
        try:
            dto = await self._invoke(portal, RemoteAction.EXECUTE, self.to_dto(), method)
            if dto is not None:
                self._load_data(dto)
                await self._load_children(dto)
        except Exception as exc:
            raise self._wrap_error(RemoteAction.EXECUTE, exc) from exc
        return self
