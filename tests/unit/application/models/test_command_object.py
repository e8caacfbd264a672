"""Tests for application/models/command_object.py."""

from typing import Any

import pytest

from boframe.application.common_rules import IsInRoleRule
from boframe.application.models import CommandObject, ReadOnlyChildObject
from boframe.domain.exceptions import PortalNotConfiguredError, RemoteActionError
from boframe.domain.model.configuration import Configuration
from boframe.domain.model.enums import AuthorizationAction, RemoteAction
from boframe.domain.model.property_info import PropertyInfo
from boframe.infrastructure.data_types import Boolean, Integer, Text
from boframe.infrastructure.portals import LocalPortal
from tests.factories import BOOKS_URI, make_config, make_user


class RenameRepository:
    """Records command payloads."""

    def __init__(self) -> None:
        self.payloads: list[Any] = []

    async def execute(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.payloads.append(payload)
        return {"done": True, "result": {"count": 3}}

    async def rename(self, payload: dict[str, Any]) -> None:
        self.payloads.append(payload)

    async def fail(self, payload: dict[str, Any]) -> None:
        raise ConnectionError("rename unavailable")


def _rename_class(config: Configuration, *rules: Any) -> type[CommandObject]:
    result = ReadOnlyChildObject.define(
        "RenameResult", properties=[PropertyInfo("count", Integer())], config=config
    )
    return CommandObject.define(
        f"RenameBook:{BOOKS_URI}",
        properties=[
            PropertyInfo("title", Text()),
            PropertyInfo("done", Boolean()),
            PropertyInfo("result", result),
        ],
        rules=rules,
        config=config,
    )


def _portal() -> tuple[LocalPortal, RenameRepository]:
    repository = RenameRepository()
    portal = LocalPortal()
    portal.register(BOOKS_URI, repository)
    return portal, repository


class TestCommandObject:
    """Tests for CommandObject."""

    def test_new(self) -> None:
        command = _rename_class(make_config()).new()
        command.title = "Dune Messiah"
        assert command.title == "Dune Messiah"
        assert command.done is None
        assert repr(command) == "<CommandObject RenameBook>"

    @pytest.mark.asyncio
    async def test_execute_loads_response(self) -> None:
        portal, repository = _portal()
        command = _rename_class(make_config(portal)).new()
        command.title = "Dune Messiah"
        assert await command.execute() is command
        assert repository.payloads == [
            {"title": "Dune Messiah", "done": None, "result": {"count": None}}
        ]
        assert command.done is True
        assert command.result.count == 3
        request = portal.requests[-1]
        assert request.action is RemoteAction.EXECUTE
        assert request.model_uri == BOOKS_URI

    @pytest.mark.asyncio
    async def test_execute_method_without_response(self) -> None:
        portal, repository = _portal()
        command = _rename_class(make_config(portal)).new()
        command.title = "Dune Messiah"
        await command.execute("rename")
        assert portal.requests[-1].method == "rename"
        assert len(repository.payloads) == 1
        assert command.done is None

    @pytest.mark.asyncio
    async def test_denied_command(self) -> None:
        portal, repository = _portal()
        Rename = _rename_class(
            make_config(portal, make_user("guest")),
            IsInRoleRule(AuthorizationAction.EXECUTE_COMMAND, None, "editor"),
        )
        command = await Rename.new().execute()
        assert portal.requests == []
        assert not command.is_valid()

    @pytest.mark.asyncio
    async def test_denied_method(self) -> None:
        portal, _ = _portal()
        Rename = _rename_class(
            make_config(portal, make_user("guest")),
            IsInRoleRule(AuthorizationAction.EXECUTE_METHOD, "rename", "editor"),
        )
        await Rename.new().execute("rename")
        assert portal.requests == []

    @pytest.mark.asyncio
    async def test_failure_is_wrapped(self) -> None:
        portal, _ = _portal()
        command = _rename_class(make_config(portal)).new()
        with pytest.raises(RemoteActionError, match="CommandObject RenameBook: execute failed"):
            await command.execute("fail")

    @pytest.mark.asyncio
    async def test_no_portal(self) -> None:
        command = _rename_class(make_config()).new()
        with pytest.raises(PortalNotConfiguredError):
            await command.execute()
