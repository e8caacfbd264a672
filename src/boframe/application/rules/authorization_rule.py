"""Authorization rule base class."""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING

from boframe.application.rules._base import Rule
from boframe.application.rules.results import AuthorizationResult
from boframe.domain.exceptions import AuthorizationError
from boframe.domain.model.enums import AuthorizationAction, NoAccessBehavior
from boframe.domain.model.property_info import PropertyInfo

if TYPE_CHECKING:
    from boframe.domain.ports.user import UserProtocol

logger = logging.getLogger(__name__)

DEFAULT_AUTHORIZATION_PRIORITY = 100


def make_rule_id(action: AuthorizationAction, target_name: str | None = None) -> str:
    """Build the authorization key: action name, optionally suffixed with target.

    Example:
        make_rule_id(AuthorizationAction.READ_PROPERTY, "salary") == "readProperty.salary"
    """
    if target_name:
        return f"{action.value}.{target_name}"
    return action.value


class AuthorizationRule(Rule):
    """Rule deciding whether the acting user may perform an action.

    Targets by action:
        READ_PROPERTY, WRITE_PROPERTY: a PropertyInfo
        EXECUTE_METHOD: a method name
        all others: None
    """

    def __init__(self, rule_name: str) -> None:
        """Initialize with rule name."""
        super().__init__(rule_name)
        self._action: AuthorizationAction | None = None
        self._target: PropertyInfo | str | None = None
        self._rule_id: str | None = None
        self._no_access_behavior: NoAccessBehavior | None = None

    @property
    def action(self) -> AuthorizationAction | None:
        """Get guarded action."""
        return self._action

    @property
    def target(self) -> PropertyInfo | str | None:
        """Get guarded property or method name."""
        return self._target

    @property
    def target_name(self) -> str | None:
        """Get name of the target, if any."""
        if isinstance(self._target, PropertyInfo):
            return self._target.name
        return self._target

    @property
    def rule_id(self) -> str | None:
        """Get authorization key. None before initialize()."""
        return self._rule_id

    @property
    def no_access_behavior(self) -> NoAccessBehavior | None:
        """Get failure behavior. None until a default is applied."""
        return self._no_access_behavior

    def initialize(
        self,
        action: AuthorizationAction,
        target: PropertyInfo | str | None,
        message: str,
        priority: int | None = None,
        stops_processing: bool = False,
        no_access_behavior: NoAccessBehavior | None = None,
    ) -> None:
        """Bind the rule to its action and target.

        Args:
            action: Guarded action.
            target: Property (property actions), method name (EXECUTE_METHOD) or None.
            message: Failure text.
            priority: Higher runs first. None = default 100.
            stops_processing: A failure halts further rules of the rule id.
            no_access_behavior: Failure behavior. None = model default.

        Raises:
            TypeError: Target does not match the action.
        """
        if not isinstance(action, AuthorizationAction):
            raise TypeError(f"action must be AuthorizationAction, got {type(action).__name__}")
        if action.targets_property:
            if not isinstance(target, PropertyInfo):
                raise TypeError(f"{action.value} requires a PropertyInfo target")
        elif action.targets_method:
            if not isinstance(target, str) or not target:
                raise TypeError(f"{action.value} requires a method name target")
        elif target is not None:
            raise TypeError(f"{action.value} takes no target")
        if no_access_behavior is not None and not isinstance(no_access_behavior, NoAccessBehavior):
            raise TypeError(
                "no_access_behavior must be NoAccessBehavior, "
                f"got {type(no_access_behavior).__name__}"
            )

        self._action = action
        self._target = target
        self._rule_id = make_rule_id(action, self.target_name)
        self._no_access_behavior = no_access_behavior
        self._initialize_base(
            message,
            DEFAULT_AUTHORIZATION_PRIORITY if priority is None else priority,
            stops_processing,
        )

    def apply_default_behavior(self, behavior: NoAccessBehavior) -> None:
        """Adopt the model-wide behavior unless the rule has its own."""
        if self._no_access_behavior is None:
            self._no_access_behavior = behavior

    @abstractmethod
    def execute(self, user: UserProtocol | None) -> AuthorizationResult | None:
        """Check the acting user.

        Args:
            user: Acting user. None = anonymous.

        Returns:
            None when access is granted, a result otherwise.

        Raises:
            AuthorizationError: Access denied and behavior is THROW_ERROR.
        """

    def result(self, message: str | None = None) -> AuthorizationResult:
        """Build the failure result of this rule.

        Raises:
            AuthorizationError: Behavior is THROW_ERROR.
        """
        text = self.message if message is None else message
        behavior = self._no_access_behavior or NoAccessBehavior.SHOW_ERROR
        if behavior is NoAccessBehavior.THROW_ERROR:
            logger.debug("Authorization rule %s denied %s", self.rule_name, self._rule_id)
            raise AuthorizationError(
                rule_name=self.rule_name,
                rule_id=self._rule_id or "",
                message=text,
            )
        target_name = self.target_name if isinstance(self._target, PropertyInfo) else None
        return AuthorizationResult(
            rule_name=self.rule_name,
            property_name=target_name or "",
            message=text,
            severity=behavior.severity,
            stops_processing=self.stops_processing,
        )
