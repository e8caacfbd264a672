"""Tests for the boframe pytest plugin fixtures.

The plugin is registered through the pytest11 entry point.
"""

import pytest

from boframe.application.models import EditableRootObject
from boframe.domain.model.configuration import Configuration
from boframe.domain.model.enums import ModelState
from boframe.domain.model.property_info import PropertyInfo
from boframe.domain.model.user import UserInfo
from boframe.infrastructure.data_types import Text
from boframe.infrastructure.portals import LocalPortal
from boframe.presentation.pytest_plugin.fixtures import DEFAULT_USER_CODE


class NoteRepository:
    """Serves one note."""

    async def fetch(self, payload: object) -> dict[str, str]:
        return {"text": "remember the milk"}


class TestFixtures:
    """Tests for bo_user, bo_portal and bo_config."""

    def test_bo_user_defaults(self, bo_user: UserInfo) -> None:
        assert bo_user.user_code == DEFAULT_USER_CODE
        assert bo_user.roles == frozenset()

    def test_bo_portal_is_empty(self, bo_portal: LocalPortal) -> None:
        assert bo_portal.repositories == {}
        assert bo_portal.requests == []

    def test_bo_config_wiring(
        self,
        bo_config: Configuration,
        bo_portal: LocalPortal,
        bo_user: UserInfo,
    ) -> None:
        assert bo_config.portal is bo_portal
        assert bo_config.user is bo_user

    @pytest.mark.bo
    @pytest.mark.asyncio
    async def test_model_round_trip(self, bo_config: Configuration, bo_portal: LocalPortal) -> None:
        bo_portal.register("notes", NoteRepository())
        Note = EditableRootObject.define(
            "Note:notes", properties=[PropertyInfo("text", Text())], config=bo_config
        )
        note = await Note.fetch(1)
        assert note.text == "remember the milk"
        assert note.get_model_state() is ModelState.PRISTINE
