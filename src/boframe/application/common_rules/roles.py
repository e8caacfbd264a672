"""Role-based authorization rules. An absent user is in no role."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from boframe.application.common_rules._messages import default_message
from boframe.application.rules.authorization_rule import AuthorizationRule

if TYPE_CHECKING:
    from boframe.application.rules.results import AuthorizationResult
    from boframe.domain.model.enums import AuthorizationAction, NoAccessBehavior
    from boframe.domain.model.property_info import PropertyInfo
    from boframe.domain.ports.user import UserProtocol


def _in_role(user: UserProtocol | None, role: str) -> bool:
    """Check role membership of a possibly absent user."""
    return user is not None and bool(user.is_in_role(role))


def _check_role(role: str) -> str:
    """Validate a role name. FAIL-FIRST."""
    if not isinstance(role, str) or not role:
        raise ValueError("role must be a non-empty string")
    return role


def _check_roles(roles: Iterable[str]) -> tuple[str, ...]:
    """Validate a role list. FAIL-FIRST."""
    if isinstance(roles, str):
        roles = (roles,)
    checked = tuple(_check_role(role) for role in roles)
    if not checked:
        raise ValueError("roles must not be empty")
    return checked


class IsInRoleRule(AuthorizationRule):
    """Grants access to members of one role."""

    def __init__(
        self,
        action: AuthorizationAction,
        target: PropertyInfo | str | None,
        role: str,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
        no_access_behavior: NoAccessBehavior | None = None,
    ) -> None:
        """Initialize with the required role."""
        super().__init__("IsInRole")
        self.role = _check_role(role)
        if message is None:
            message = default_message("isInRole", role=role)
        self.initialize(
            action,
            target,
            message,
            priority,
            stops_processing,
            no_access_behavior,
        )

    def execute(self, user: UserProtocol | None) -> AuthorizationResult | None:
        """Deny users outside the role."""
        return None if _in_role(user, self.role) else self.result()


class IsNotInRoleRule(AuthorizationRule):
    """Denies access to members of one role."""

    def __init__(
        self,
        action: AuthorizationAction,
        target: PropertyInfo | str | None,
        role: str,
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
        no_access_behavior: NoAccessBehavior | None = None,
    ) -> None:
        """Initialize with the excluded role."""
        super().__init__("IsNotInRole")
        self.role = _check_role(role)
        if message is None:
            message = default_message("isNotInRole", role=role)
        self.initialize(
            action,
            target,
            message,
            priority,
            stops_processing,
            no_access_behavior,
        )

    def execute(self, user: UserProtocol | None) -> AuthorizationResult | None:
        """Deny members of the role."""
        return self.result() if _in_role(user, self.role) else None


class IsInAnyRoleRule(AuthorizationRule):
    """Grants access to members of at least one of several roles."""

    def __init__(
        self,
        action: AuthorizationAction,
        target: PropertyInfo | str | None,
        roles: Iterable[str],
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
        no_access_behavior: NoAccessBehavior | None = None,
    ) -> None:
        """Initialize with the accepted roles."""
        super().__init__("IsInAnyRole")
        self.roles = _check_roles(roles)
        if message is None:
            message = default_message("isInAnyRole", roles=", ".join(self.roles))
        self.initialize(
            action,
            target,
            message,
            priority,
            stops_processing,
            no_access_behavior,
        )

    def execute(self, user: UserProtocol | None) -> AuthorizationResult | None:
        """Deny users in none of the roles."""
        return None if any(_in_role(user, role) for role in self.roles) else self.result()


class IsInAllRolesRule(AuthorizationRule):
    """Grants access to members of every one of several roles."""

    def __init__(
        self,
        action: AuthorizationAction,
        target: PropertyInfo | str | None,
        roles: Iterable[str],
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
        no_access_behavior: NoAccessBehavior | None = None,
    ) -> None:
        """Initialize with the required roles."""
        super().__init__("IsInAllRoles")
        self.roles = _check_roles(roles)
        if message is None:
            message = default_message("isInAllRoles", roles=", ".join(self.roles))
        self.initialize(
            action,
            target,
            message,
            priority,
            stops_processing,
            no_access_behavior,
        )

    def execute(self, user: UserProtocol | None) -> AuthorizationResult | None:
        """Deny users missing any of the roles."""
        return None if all(_in_role(user, role) for role in self.roles) else self.result()


class IsNotInAnyRoleRule(AuthorizationRule):
    """Denies access to members of any of several roles."""

    def __init__(
        self,
        action: AuthorizationAction,
        target: PropertyInfo | str | None,
        roles: Iterable[str],
        message: str | None = None,
        priority: int | None = None,
        stops_processing: bool = False,
        no_access_behavior: NoAccessBehavior | None = None,
    ) -> None:
        """Initialize with the excluded roles."""
        super().__init__("IsNotInAnyRole")
        self.roles = _check_roles(roles)
        if message is None:
            message = default_message("isNotInAnyRole", roles=", ".join(self.roles))
        self.initialize(
            action,
            target,
            message,
            priority,
            stops_processing,
            no_access_behavior,
        )

    def execute(self, user: UserProtocol | None) -> AuthorizationResult | None:
        """Deny members of any of the roles."""
        return self.result() if any(_in_role(user, role) for role in self.roles) else None
