"""
Rule validation utilities.

Functions for validating rule YAML files and producing readable results.
"""

from pathlib import Path
from typing import Any

import structlog
import yaml

from checkgate.core.errors import ConfigurationError
from checkgate.rules.loaders.yaml_loader import parse_rules

logger = structlog.get_logger(__name__)

EXAMPLE_RULES = (
    "```yaml\n"
    "rules:\n"
    "  - id: tests-pass\n"
    "    category: testing\n"
    "    description: All tests pass\n"
    "    required: true\n"
    "```\n"
)


def validate_rules_file(path: str | Path) -> dict[str, Any]:
    """Validate a rules file on disk."""
    rules_path = Path(path)
    if not rules_path.is_file():
        return {
            "success": False,
            "message": (
                "⚙️ **checkgate rules not configured**\n\n"
                f"No rules file found at `{rules_path}`.\n\n"
                "**How to set up rules:**\n"
                f"1. Create `{rules_path}`\n"
                "2. Add your rules in the following format:\n"
                f"{EXAMPLE_RULES}\n"
                "Without a rules file the built-in checklist is used."
            ),
        }
    return validate_rules_yaml(rules_path.read_text(encoding="utf-8"))


def validate_rules_yaml(content: str) -> dict[str, Any]:
    """Validate rules YAML content and describe the outcome in Markdown."""
    try:
        rules_data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        return {
            "success": False,
            "message": (
                "❌ **Failed to parse rules file**\n\n"
                f"Error details: `{e}`\n\n"
                "**How to fix:**\n"
                "- Ensure your YAML is valid.\n"
                "- Check for indentation, missing colons, or invalid syntax."
            ),
        }

    if not isinstance(rules_data, dict) or "rules" not in rules_data:
        return {
            "success": False,
            "message": (
                f"❌ **Invalid rules file: missing top-level `rules:` key**\n\nYour file must start with a `rules:` key, like:\n{EXAMPLE_RULES}"
            ),
        }

    if not isinstance(rules_data["rules"], list):
        return {
            "success": False,
            "message": f"❌ **Invalid rules file: `rules` must be a list**\n\nExample:\n{EXAMPLE_RULES}",
        }

    try:
        rule_set = parse_rules(content)
    except ConfigurationError as e:
        logger.info("rules_validation_failed", code=e.code, rule_id=e.rule_id)
        return {
            "success": False,
            "message": (
                f"❌ **Rules file failed validation**\n\nError: `{e.message}`\n\n"
                "Please check your rule definition and fix the error above."
            ),
        }

    required = sum(1 for rule in rule_set.rules if rule.required)
    return {
        "success": True,
        "message": (
            f"✅ **Rules file is valid and contains {len(rule_set.rules)} rules "
            f"({required} required, {len(rule_set.rules) - required} optional).**\n\nNo action needed."
        ),
    }
