from pathlib import Path

import pytest

from checkgate.core.config import config
from checkgate.core.errors import (
    DuplicateRuleIdError,
    EmptyRuleSetError,
    RuleDefinitionError,
    RulesFileNotFoundError,
    UnknownChecklistError,
)
from checkgate.core.models import RuleCategory
from checkgate.rules.checklists import SECURITY_CHECKLIST
from checkgate.rules.loaders import ChecklistRuleLoader, YamlRuleLoader, parse_rules


class TestParseRules:
    def test_parses_rules_in_order(self, rules_yaml: str) -> None:
        rule_set = parse_rules(rules_yaml)

        assert rule_set.name == "project"
        assert rule_set.ids == ("tests", "lint")
        assert rule_set.rules[1].category == RuleCategory.CODE_QUALITY
        assert rule_set.rules[1].required is False

    def test_fallback_name(self) -> None:
        rule_set = parse_rules("rules:\n  - id: tests\n    category: testing\n", name="fallback")
        assert rule_set.name == "fallback"

    def test_invalid_yaml(self) -> None:
        with pytest.raises(RuleDefinitionError) as exc_info:
            parse_rules("rules: [unclosed")
        assert "Invalid YAML" in exc_info.value.message

    @pytest.mark.parametrize("content", ["", "- id: tests", "other: 1"])
    def test_missing_rules_key(self, content: str) -> None:
        with pytest.raises(RuleDefinitionError, match="Missing top-level 'rules' key"):
            parse_rules(content)

    def test_rules_not_a_list(self) -> None:
        with pytest.raises(RuleDefinitionError, match="must be a list"):
            parse_rules("rules:\n  tests: true\n")

    def test_rule_not_a_mapping(self) -> None:
        with pytest.raises(RuleDefinitionError) as exc_info:
            parse_rules("rules:\n  - tests\n")
        assert exc_info.value.index == 1

    def test_malformed_rule_reports_index_and_id(self) -> None:
        content = "rules:\n  - id: tests\n    category: testing\n  - id: perf\n    category: performance\n"

        with pytest.raises(RuleDefinitionError) as exc_info:
            parse_rules(content)

        assert exc_info.value.index == 2
        assert exc_info.value.rule_id == "perf"
        assert "category" in exc_info.value.message

    def test_padded_id_rejected(self) -> None:
        """A quoted id with surrounding spaces would never match a signal key."""
        with pytest.raises(RuleDefinitionError) as exc_info:
            parse_rules('rules:\n  - id: " tests "\n    category: testing\n')

        assert exc_info.value.index == 1
        assert "id" in exc_info.value.message

    def test_empty_rules_list(self) -> None:
        with pytest.raises(EmptyRuleSetError):
            parse_rules("rules: []\n")

    def test_duplicate_ids(self) -> None:
        content = "rules:\n  - id: tests\n    category: testing\n  - id: tests\n    category: security\n"
        with pytest.raises(DuplicateRuleIdError):
            parse_rules(content)


class TestYamlRuleLoader:
    def test_loads_file(self, tmp_path: Path, rules_yaml: str) -> None:
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(rules_yaml, encoding="utf-8")

        rule_set = YamlRuleLoader().get_rules(rules_file)

        assert rule_set.ids == ("tests", "lint")

    def test_name_defaults_to_file_stem(self, tmp_path: Path) -> None:
        rules_file = tmp_path / "security-gate.yaml"
        rules_file.write_text("rules:\n  - id: secrets\n    category: security\n", encoding="utf-8")

        assert YamlRuleLoader().get_rules(rules_file).name == "security-gate"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RulesFileNotFoundError):
            YamlRuleLoader().get_rules(tmp_path / "absent.yaml")

    def test_uses_configured_path(
        self, tmp_path: Path, rules_yaml: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "policy").mkdir()
        (tmp_path / "policy" / "rules.yaml").write_text(rules_yaml, encoding="utf-8")
        monkeypatch.setattr(config.repo_config, "base_path", str(tmp_path / "policy"))

        assert YamlRuleLoader().get_rules().ids == ("tests", "lint")


class TestChecklistRuleLoader:
    def test_resolves_checklist(self) -> None:
        assert ChecklistRuleLoader().get_rules("security") is SECURITY_CHECKLIST

    def test_unknown_checklist(self) -> None:
        with pytest.raises(UnknownChecklistError):
            ChecklistRuleLoader().get_rules("nope")
