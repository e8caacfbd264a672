"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output format
- Severity filtering
"""

import pytest

from boframe.application.reporters.console import ConsoleConfig, ConsoleReporter
from boframe.domain.model.broken_rule import RuleNotice
from boframe.domain.model.broken_rules_output import BrokenRulesOutput
from boframe.domain.model.broken_rules_response import BrokenRulesResponse
from boframe.domain.model.enums import RuleSeverity


def _response() -> BrokenRulesResponse:
    author = BrokenRulesOutput(index=1)
    author.add("name", RuleNotice(message="Name is required", severity=RuleSeverity.ERROR))
    publisher = BrokenRulesOutput()
    publisher.add("company", RuleNotice(message="Company is short", severity=RuleSeverity.WARNING))
    output = BrokenRulesOutput()
    output.add("title", RuleNotice(message="Title is required", severity=RuleSeverity.ERROR))
    output.add("title", RuleNotice(message="Check the title", severity=RuleSeverity.INFORMATION))
    output.add_children("authors", [author])
    output.add_child("publisher", publisher)
    return BrokenRulesResponse(message="Book is invalid", data=output)


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.width == 120
        assert config.min_severity is None

    def test_custom_values(self) -> None:
        """Custom values can be set."""
        config = ConsoleConfig(width=80, min_severity=RuleSeverity.WARNING)
        assert config.width == 80
        assert config.min_severity is RuleSeverity.WARNING

    def test_width_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="width must be positive"):
            ConsoleConfig(width=0)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """Report starts with response name, status and summary."""
        result = ConsoleReporter().report(_response())
        assert "BrokenRules" in result
        assert "422" in result
        assert "Book is invalid" in result
        assert "notices: 4" in result

    def test_report_contains_notices(self) -> None:
        """Every notice of the tree is rendered with its property."""
        result = ConsoleReporter().report(_response())
        assert "title" in result
        assert "Title is required" in result
        assert "Check the title" in result
        assert "Company is short" in result

    def test_report_contains_children(self) -> None:
        """Child entries and collection items are rendered as branches."""
        result = ConsoleReporter().report(_response())
        assert "publisher" in result
        assert "authors" in result
        assert "1 items" in result
        assert "#00001" in result
        assert "Name is required" in result

    def test_min_severity_hides_lower_notices(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(min_severity=RuleSeverity.WARNING))
        result = reporter.report(_response())
        assert "Check the title" not in result
        assert "Company is short" in result
        assert "Title is required" in result

    def test_report_returns_string(self) -> None:
        """Report is returned, not printed."""
        assert isinstance(ConsoleReporter().report(_response()), str)
