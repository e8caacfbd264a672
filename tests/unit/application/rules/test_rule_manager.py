"""Tests for application/rules/rule_manager.py."""

from typing import Any

import pytest

from boframe.application.common_rules import IsInRoleRule
from boframe.application.rules.broken_rule_list import BrokenRuleList
from boframe.application.rules.contexts import AuthorizationContext, ValidationContext
from boframe.application.rules.rule_manager import RuleManager
from boframe.application.rules.validation_rule import ValidationRule
from boframe.domain.exceptions import (
    AuthorizationError,
    CyclicDependencyError,
    ModelDefinitionError,
    RuleNotInitializedError,
)
from boframe.domain.model.enums import AuthorizationAction, NoAccessBehavior, RuleSeverity
from tests.factories import RecordingRule, make_prop, make_user


class UnboundRule(ValidationRule):
    """Validation rule that never ran initialize()."""

    def __init__(self) -> None:
        super().__init__("Unbound")

    def execute(self, inputs: Any) -> Any:
        return None


def _context(values: dict[str, Any] | None = None) -> ValidationContext:
    values = values or {}
    return ValidationContext(lambda prop: values.get(prop.name), BrokenRuleList("Book"))


def _manager(*rules: Any, behavior: NoAccessBehavior = NoAccessBehavior.SHOW_ERROR) -> RuleManager:
    manager = RuleManager("Book", rules)
    manager.initialize(behavior)
    return manager


def _auth(
    action: AuthorizationAction,
    user: Any = None,
    target: str | None = None,
) -> AuthorizationContext:
    return AuthorizationContext(action, target, user, BrokenRuleList("Book"))


class TestRuleManagerSetup:
    """Tests for add and initialize."""

    def test_add_after_initialize_raises(self) -> None:
        manager = _manager()
        with pytest.raises(ModelDefinitionError, match="after initialization"):
            manager.add(RecordingRule(make_prop("title"), "late", []))

    def test_initialize_twice_raises(self) -> None:
        manager = _manager()
        with pytest.raises(ModelDefinitionError, match="already initialized"):
            manager.initialize(NoAccessBehavior.SHOW_ERROR)

    def test_uninitialized_rule_raises(self) -> None:
        with pytest.raises(RuleNotInitializedError, match="rule 'Unbound' must be initialized"):
            RuleManager("Book", [UnboundRule()])

    def test_not_a_rule_raises(self) -> None:
        with pytest.raises(TypeError, match="expected ValidationRule or AuthorizationRule"):
            RuleManager("Book", [object()])  # type: ignore[list-item]

    def test_keys(self) -> None:
        manager = _manager(
            RecordingRule(make_prop("title"), "a", []),
            IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"),
        )
        assert manager.validation_keys() == ("title",)
        assert manager.authorization_keys() == ("fetchObject",)
        assert manager.is_initialized

    def test_default_behavior_applied(self) -> None:
        rule = IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader")
        _manager(rule, behavior=NoAccessBehavior.SHOW_WARNING)
        assert rule.no_access_behavior is NoAccessBehavior.SHOW_WARNING

    def test_cycle_rejected(self) -> None:
        start = make_prop("start")
        end = make_prop("end")
        forward = RecordingRule(start, "forward", [])
        forward.add_affected_property(end)
        backward = RecordingRule(end, "backward", [])
        backward.add_affected_property(start)
        manager = RuleManager("Range", [forward, backward])
        with pytest.raises(CyclicDependencyError, match="cyclic affected properties: end, start"):
            manager.initialize(NoAccessBehavior.SHOW_ERROR)


class TestRuleManagerValidate:
    """Tests for validate."""

    def test_runs_in_priority_order(self) -> None:
        prop = make_prop("title")
        calls: list[str] = []
        manager = _manager(
            RecordingRule(prop, "low", calls, priority=1),
            RecordingRule(prop, "high", calls, priority=90),
            RecordingRule(prop, "mid-a", calls),
            RecordingRule(prop, "mid-b", calls),
        )
        manager.validate(prop, _context())
        assert calls == ["high", "mid-a", "mid-b", "low"]

    def test_records_failures(self) -> None:
        prop = make_prop("title")
        context = _context()
        _manager(RecordingRule(prop, "check", [], fails=True)).validate(prop, context)
        records = context.broken_rules.get("title")
        assert [record.message for record in records] == ["check failed"]
        assert not context.broken_rules.is_valid()

    def test_success_result_not_recorded(self) -> None:
        prop = make_prop("title")
        context = _context()
        rule = RecordingRule(prop, "check", [], fails=True, severity=RuleSeverity.SUCCESS)
        _manager(rule).validate(prop, context)
        assert not context.broken_rules

    def test_stops_processing(self) -> None:
        prop = make_prop("title")
        calls: list[str] = []
        manager = _manager(
            RecordingRule(prop, "first", calls, fails=True, stops_processing=True),
            RecordingRule(prop, "second", calls),
        )
        manager.validate(prop, _context())
        assert calls == ["first"]

    def test_stop_flag_ignored_without_failure(self) -> None:
        prop = make_prop("title")
        calls: list[str] = []
        manager = _manager(
            RecordingRule(prop, "first", calls, stops_processing=True),
            RecordingRule(prop, "second", calls),
        )
        manager.validate(prop, _context())
        assert calls == ["first", "second"]

    def test_clears_previous_records(self) -> None:
        prop = make_prop("title")
        rule = RecordingRule(prop, "check", [], fails=True)
        manager = _manager(rule)
        context = _context()
        manager.validate(prop, context)
        rule.fails = False
        manager.validate(prop, context)
        assert not context.broken_rules

    def test_cascade_to_affected_property(self) -> None:
        start = make_prop("start")
        end = make_prop("end")
        calls: list[str] = []
        trigger = RecordingRule(
            start, "trigger", calls, fails=True, severity=RuleSeverity.INFORMATION
        )
        trigger.add_affected_property(end)
        manager = _manager(trigger, RecordingRule(end, "end-check", calls, fails=True))
        context = _context()
        manager.validate(start, context)
        assert calls == ["trigger", "end-check"]
        assert len(context.broken_rules.get("end")) == 1

    def test_cascade_runs_before_stop(self) -> None:
        start = make_prop("start")
        end = make_prop("end")
        calls: list[str] = []
        trigger = RecordingRule(start, "trigger", calls, fails=True, stops_processing=True)
        trigger.add_affected_property(end)
        manager = _manager(
            trigger,
            RecordingRule(start, "skipped", calls, priority=1),
            RecordingRule(end, "end-check", calls),
        )
        manager.validate(start, _context())
        assert calls == ["trigger", "end-check"]

    def test_property_without_rules(self) -> None:
        context = _context()
        _manager().validate(make_prop("title"), context)
        assert not context.broken_rules


class TestRuleManagerHasPermission:
    """Tests for has_permission."""

    def test_no_rules_grants(self) -> None:
        assert _manager().has_permission(_auth(AuthorizationAction.FETCH_OBJECT))

    def test_member_granted(self) -> None:
        manager = _manager(IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"))
        assert manager.has_permission(_auth(AuthorizationAction.FETCH_OBJECT, make_user("reader")))

    def test_denial_recorded_as_preserved(self) -> None:
        manager = _manager(IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"))
        context = _auth(AuthorizationAction.FETCH_OBJECT, make_user())
        assert not manager.has_permission(context)
        records = context.broken_rules.get("Book")
        assert len(records) == 1
        assert records[0].is_preserved

    def test_anonymous_denied(self) -> None:
        manager = _manager(IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"))
        assert not manager.has_permission(_auth(AuthorizationAction.FETCH_OBJECT))

    def test_stops_processing(self) -> None:
        manager = _manager(
            IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader", stops_processing=True),
            IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "admin"),
        )
        context = _auth(AuthorizationAction.FETCH_OBJECT, make_user())
        assert not manager.has_permission(context)
        assert len(context.broken_rules) == 1

    def test_all_failures_recorded_without_stop(self) -> None:
        manager = _manager(
            IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"),
            IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "admin"),
        )
        context = _auth(AuthorizationAction.FETCH_OBJECT, make_user())
        manager.has_permission(context)
        assert len(context.broken_rules) == 2

    def test_other_actions_unaffected(self) -> None:
        manager = _manager(IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"))
        assert manager.has_permission(_auth(AuthorizationAction.UPDATE_OBJECT, make_user()))

    def test_throw_error_propagates(self) -> None:
        manager = _manager(
            IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"),
            behavior=NoAccessBehavior.THROW_ERROR,
        )
        message = "fetchObject: The user is not a member of the reader role"
        with pytest.raises(AuthorizationError, match=message):
            manager.has_permission(_auth(AuthorizationAction.FETCH_OBJECT, make_user()))
