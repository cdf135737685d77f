"""
YAML rule loader.

Loads rule sets from a rules file, implementing the RuleLoader interface.
The expected layout is:

    name: pre-commit
    rules:
      - id: tests-pass
        category: testing
        description: All tests pass
        required: true
"""

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from checkgate.core.config import config
from checkgate.core.errors import RuleDefinitionError, RulesFileNotFoundError
from checkgate.core.utils.logging import log_operation
from checkgate.rules.interface import RuleLoader
from checkgate.rules.models import Rule, RuleSet

logger = structlog.get_logger(__name__)


def parse_rules(content: str, name: str | None = None) -> RuleSet:
    """
    Parse a rules YAML document into a checked RuleSet.

    Args:
        content: YAML text with a top-level ``rules`` list.
        name: Fallback rule set name when the document has no ``name`` key.

    Raises:
        RuleDefinitionError: The document or one of its rules is malformed.
        EmptyRuleSetError: The ``rules`` list is empty.
        DuplicateRuleIdError: Two rules share an identifier.
    """
    try:
        rules_data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RuleDefinitionError(f"Invalid YAML: {e}") from e

    if not isinstance(rules_data, dict) or "rules" not in rules_data:
        raise RuleDefinitionError("Missing top-level 'rules' key")

    if not isinstance(rules_data["rules"], list):
        raise RuleDefinitionError("'rules' must be a list")

    rules = [_parse_rule(rule_data, index) for index, rule_data in enumerate(rules_data["rules"], start=1)]

    set_name = rules_data.get("name", name)
    return RuleSet(name=str(set_name) if set_name is not None else None, rules=tuple(rules)).check()


def _parse_rule(rule_data: Any, index: int) -> Rule:
    if not isinstance(rule_data, dict):
        raise RuleDefinitionError("Rule must be a mapping", index=index)

    try:
        return Rule.model_validate(rule_data)
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors())
        rule_id = rule_data.get("id")
        raise RuleDefinitionError(problems, index=index, rule_id=rule_id if isinstance(rule_id, str) else None) from e


class YamlRuleLoader(RuleLoader):
    """
    Loads rules from a YAML rules file on disk.
    Defaults to the configured ``.checkgate/rules.yaml``.
    """

    def get_rules(self, source: str | Path | None = None) -> RuleSet:
        rules_path = Path(source) if source is not None else config.repo_config.rules_path

        with log_operation("rule_loading", rules_file=str(rules_path)):
            if not rules_path.is_file():
                logger.warning("rules_file_missing", rules_file=str(rules_path))
                raise RulesFileNotFoundError(f"Rules file not found: {rules_path}")

            content = rules_path.read_text(encoding="utf-8")
            rule_set = parse_rules(content, name=rules_path.stem)

        logger.info("rules_loaded", rules_file=str(rules_path), rule_count=len(rule_set.rules))
        return rule_set


yaml_rule_loader = YamlRuleLoader()
