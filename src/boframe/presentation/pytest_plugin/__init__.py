"""pytest plugin for boframe.

Provides fixtures for business object tests:
    bo_user: Acting user (UserInfo)
    bo_portal: In-process LocalPortal
    bo_config: Configuration wired to bo_portal and bo_user

Configuration (pytest.ini or pyproject.toml):
    bo_user_code: User code of bo_user (default: "tester")
    bo_user_roles: Roles of bo_user (default: none)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from boframe.presentation.pytest_plugin.fixtures import bo_config, bo_portal, bo_user

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "bo_config",
    "bo_portal",
    "bo_user",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("bo_user_code", "user code of the bo_user fixture", default="")
    parser.addini("bo_user_roles", "roles of the bo_user fixture", type="linelist", default=[])


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "bo: mark test as business object test",
    )
