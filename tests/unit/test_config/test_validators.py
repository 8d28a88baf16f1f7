"""
Unit tests for rule definition validation.
"""

import pytest

from procgroups.config.validators import validate_rule_definition, validate_rule_definitions
from procgroups.models.config import RuleDefinition
from procgroups.validation import ValidationError


@pytest.mark.unit
class TestValidateRuleDefinition:
    """Test validation of single raw definitions."""

    def test_full_definition(self):
        definition = validate_rule_definition(
            {
                "comm": ["a"],
                "exe": ["/bin/b"],
                "cmdline": ["^c"],
                "name": "{{.Comm}}",
                "report_missing": True,
            },
            index=5,
        )

        assert definition == RuleDefinition(
            index=5,
            comm=("a",),
            exe=("/bin/b",),
            cmdline=("^c",),
            name="{{.Comm}}",
            report_missing=True,
        )

    def test_absent_keys_are_none(self):
        definition = validate_rule_definition({"comm": ["a"]}, index=0)

        assert definition.exe is None
        assert definition.cmdline is None
        assert definition.name is None
        assert definition.report_missing is False

    def test_not_a_map(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition(["comm", "a"], index=2)

        assert "process_names[2]" in str(exc_info.value)
        assert "not a map" in str(exc_info.value)

    def test_non_string_key(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({1: ["a"], "comm": ["a"]}, index=0)

        assert "non-string key" in str(exc_info.value)

    def test_unknown_key(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({"comm": ["a"], "command": ["b"]}, index=1)

        assert exc_info.value.field_name == "process_names[1].command"

    @pytest.mark.parametrize("key", ["comm", "exe", "cmdline"])
    def test_list_key_must_be_list(self, key):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({key: "single"}, index=3)

        assert exc_info.value.field_name == f"process_names[3].{key}"

    @pytest.mark.parametrize("key", ["comm", "exe", "cmdline"])
    def test_list_elements_must_be_strings(self, key):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({key: ["ok", 42]}, index=0)

        assert exc_info.value.field_name == f"process_names[0].{key}[1]"

    def test_name_must_be_string(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({"comm": ["a"], "name": ["x"]}, index=0)

        assert exc_info.value.field_name == "process_names[0].name"

    def test_null_name_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({"comm": ["a"], "name": None}, index=0)

        assert exc_info.value.field_name == "process_names[0].name"

    def test_report_missing_must_be_boolean(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({"comm": ["a"], "report_missing": "yes"}, index=0)

        assert exc_info.value.field_name == "process_names[0].report_missing"

    def test_no_matchers(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definition({"name": "nginx", "report_missing": True}, index=7)

        assert "process_names[7]: no matchers provided" in str(exc_info.value)


@pytest.mark.unit
class TestValidateRuleDefinitions:
    """Test validation of the whole process_names list."""

    def test_keeps_order_and_indexes(self, sample_rules_data):
        definitions = validate_rule_definitions(sample_rules_data)

        assert [d.index for d in definitions] == [0, 1, 2, 3]
        assert definitions[0].name == "nginx"
        assert definitions[1].comm == ("sshd",)

    def test_first_error_aborts(self, sample_rules_data):
        sample_rules_data.insert(1, {"comm": "sshd"})
        sample_rules_data.append({"bogus": True})

        with pytest.raises(ValidationError) as exc_info:
            validate_rule_definitions(sample_rules_data)

        assert exc_info.value.field_name == "process_names[1].comm"

    def test_empty_list(self):
        assert validate_rule_definitions([]) == []
