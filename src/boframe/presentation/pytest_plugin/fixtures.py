"""pytest fixtures for business object tests.

User overrides bo_user or bo_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from boframe.domain.model.configuration import Configuration
from boframe.domain.model.user import UserInfo
from boframe.infrastructure.portals.local import LocalPortal

DEFAULT_USER_CODE = "tester"


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback."""
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture
def bo_user(request: pytest.FixtureRequest) -> UserInfo:
    """Acting user of the test.

    Reads bo_user_code and bo_user_roles from pytest.ini.

    Returns:
        UserInfo with the configured roles (none by default)
    """
    code = _get_ini_value(request.config, "bo_user_code", DEFAULT_USER_CODE)
    roles = request.config.getini("bo_user_roles") or []
    return UserInfo(user_code=code, roles=frozenset(str(role) for role in roles))


@pytest.fixture
def bo_portal() -> LocalPortal:
    """Empty in-process portal. Register repositories per model uri.

    Returns:
        Fresh LocalPortal
    """
    return LocalPortal()


@pytest.fixture
def bo_config(bo_portal: LocalPortal, bo_user: UserInfo) -> Configuration:
    """Configuration wired to the test portal and user.

    Returns:
        Configuration with default behaviors
    """
    return Configuration(portal=bo_portal, user_reader=lambda: bo_user)
