"""Tests for application/rules/validation_rule.py and rules/_base.py."""

import pytest

from boframe.application.rules.data_type_rule import DATA_TYPE_PRIORITY, DataTypeRule
from boframe.domain.model.enums import RuleSeverity
from tests.factories import RecordingRule, make_prop


class TestRuleConfiguration:
    """Tests for the two-step configuration of rules."""

    def test_defaults(self) -> None:
        rule = RecordingRule(make_prop("title"), "check", [])
        assert rule.rule_name == "check"
        assert rule.message == "check failed"
        assert rule.priority == 10
        assert not rule.stops_processing
        assert rule.is_initialized

    def test_initialize_twice_raises(self) -> None:
        rule = RecordingRule(make_prop("title"), "check", [])
        with pytest.raises(RuntimeError, match="already initialized"):
            rule.initialize(make_prop("title"), "again")

    def test_empty_rule_name_raises(self) -> None:
        with pytest.raises(ValueError, match="rule_name must not be empty"):
            RecordingRule(make_prop("title"), "", [])

    def test_bool_priority_raises(self) -> None:
        with pytest.raises(TypeError, match="priority must be int"):
            RecordingRule(make_prop("title"), "check", [], priority=True)

    def test_primary_property_must_be_property_info(self) -> None:
        with pytest.raises(TypeError, match="primary_property must be PropertyInfo"):
            RecordingRule("title", "check", [])  # type: ignore[arg-type]

    def test_repr(self) -> None:
        rule = RecordingRule(make_prop("title"), "check", [], priority=3)
        assert repr(rule) == "RecordingRule(rule_name='check', priority=3)"


class TestValidationRuleInputs:
    """Tests for input and affected properties."""

    def test_get_input_values(self) -> None:
        title = make_prop("title")
        subtitle = make_prop("subtitle")
        rule = RecordingRule(title, "check", [])
        rule.add_input_property(subtitle)
        rule.add_input_property(subtitle)
        values = {"title": "Dune", "subtitle": None}
        assert rule.input_properties == (subtitle,)
        assert rule.get_input_values(lambda prop: values[prop.name]) == values

    def test_affected_properties_are_unique(self) -> None:
        rule = RecordingRule(make_prop("start"), "check", [])
        end = make_prop("end")
        rule.add_affected_property(end)
        rule.add_affected_property(end)
        assert rule.affected_properties == (end,)

    def test_affected_property_type_checked(self) -> None:
        rule = RecordingRule(make_prop("start"), "check", [])
        with pytest.raises(TypeError, match="affected property must be PropertyInfo"):
            rule.add_affected_property("end")  # type: ignore[arg-type]


class TestValidationRuleResult:
    """Tests for ValidationRule.result."""

    def test_result_uses_rule_configuration(self) -> None:
        end = make_prop("end")
        rule = RecordingRule(make_prop("start"), "check", [], stops_processing=True)
        rule.add_affected_property(end)
        result = rule.result()
        assert result.rule_name == "check"
        assert result.property_name == "start"
        assert result.message == "check failed"
        assert result.severity is RuleSeverity.ERROR
        assert result.stops_processing
        assert result.affected_properties == (end,)

    def test_result_overrides(self) -> None:
        rule = RecordingRule(make_prop("start"), "check", [])
        result = rule.result("custom", RuleSeverity.WARNING)
        assert result.message == "custom"
        assert result.severity is RuleSeverity.WARNING

    def test_success_result_is_not_recorded(self) -> None:
        rule = RecordingRule(make_prop("start"), "check", [])
        assert rule.result(severity=RuleSeverity.SUCCESS).is_success

    def test_to_broken_rule_is_not_preserved(self) -> None:
        record = RecordingRule(make_prop("start"), "check", []).result().to_broken_rule()
        assert not record.is_preserved


class TestDataTypeRule:
    """Tests for DataTypeRule."""

    def test_highest_priority_and_stops(self) -> None:
        rule = DataTypeRule(make_prop("pages"), "Pages has an invalid value")
        assert rule.priority == DATA_TYPE_PRIORITY
        assert rule.stops_processing
        assert rule.rule_name == "DataType"

    def test_reports_nothing(self) -> None:
        rule = DataTypeRule(make_prop("pages"), "Pages has an invalid value")
        assert rule.execute({"pages": None}) is None
