"""Tests for domain/model/broken_rules_response.py."""

import pytest

from boframe.domain.model.broken_rule import RuleNotice
from boframe.domain.model.broken_rules_output import BrokenRulesOutput
from boframe.domain.model.broken_rules_response import BrokenRulesResponse
from boframe.domain.model.enums import RuleSeverity


def _output() -> BrokenRulesOutput:
    output = BrokenRulesOutput()
    output.add("title", RuleNotice(message="Title is required", severity=RuleSeverity.ERROR))
    output.add("title", RuleNotice(message="Title is short", severity=RuleSeverity.WARNING))
    return output


class TestBrokenRulesResponse:
    """Tests for BrokenRulesResponse."""

    def test_defaults(self) -> None:
        response = BrokenRulesResponse(message="Invalid book", data=_output())
        assert response.name == "BrokenRules"
        assert response.status == 422
        assert response.count == 2
        assert response.length == 1

    def test_to_dict(self) -> None:
        response = BrokenRulesResponse(message="Invalid book", data=_output())
        wire = response.to_dict()
        assert wire["name"] == "BrokenRules"
        assert wire["status"] == 422
        assert wire["message"] == "Invalid book"
        assert wire["count"] == 2
        assert wire["length"] == 1
        assert wire["data"]["title"][1] == {"message": "Title is short", "severity": "warning"}

    def test_empty_data_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one entry"):
            BrokenRulesResponse(message="Invalid book", data=BrokenRulesOutput())
