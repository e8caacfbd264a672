"""Tests for application/rules/contexts.py."""

import pytest

from boframe.application.rules.broken_rule_list import BrokenRuleList
from boframe.application.rules.contexts import AuthorizationContext
from boframe.domain.model.enums import AuthorizationAction


class TestAuthorizationContext:
    """Tests for AuthorizationContext."""

    def test_rule_id_with_target(self) -> None:
        context = AuthorizationContext(
            AuthorizationAction.READ_PROPERTY, "salary", None, BrokenRuleList("Employee")
        )
        assert context.rule_id == "readProperty.salary"

    def test_rule_id_without_target(self) -> None:
        context = AuthorizationContext(
            AuthorizationAction.UPDATE_OBJECT, None, None, BrokenRuleList("Employee")
        )
        assert context.rule_id == "updateObject"

    def test_missing_target_raises(self) -> None:
        with pytest.raises(ValueError, match="executeMethod requires a target name"):
            AuthorizationContext(
                AuthorizationAction.EXECUTE_METHOD, None, None, BrokenRuleList("Job")
            )

    def test_unexpected_target_raises(self) -> None:
        with pytest.raises(ValueError, match="fetchObject takes no target name"):
            AuthorizationContext(AuthorizationAction.FETCH_OBJECT, "x", None, BrokenRuleList("Job"))

    def test_bad_action_raises(self) -> None:
        with pytest.raises(TypeError, match="action must be AuthorizationAction"):
            AuthorizationContext(
                "fetchObject",  # type: ignore[arg-type]
                None,
                None,
                BrokenRuleList("Job"),
            )
