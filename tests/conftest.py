"""
Pytest configuration: project root on sys.path plus shared rule-set fixtures.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from checkgate.core.models import RuleCategory  # noqa: E402
from checkgate.rules.models import Rule, RuleSet  # noqa: E402


@pytest.fixture
def tests_rule() -> Rule:
    return Rule(id="tests", category=RuleCategory.TESTING, description="All tests pass", required=True)


@pytest.fixture
def lint_rule() -> Rule:
    return Rule(id="lint", category=RuleCategory.CODE_QUALITY, description="Linter is clean", required=False)


@pytest.fixture
def rule_set(tests_rule: Rule, lint_rule: Rule) -> RuleSet:
    """Required tests rule followed by an advisory lint rule."""
    return RuleSet.of(tests_rule, lint_rule, name="sample")


@pytest.fixture
def rules_yaml() -> str:
    return (
        "name: project\n"
        "rules:\n"
        "  - id: tests\n"
        "    category: testing\n"
        "    description: All tests pass\n"
        "    required: true\n"
        "  - id: lint\n"
        "    category: CodeQuality\n"
        "    description: Linter is clean\n"
        "    required: false\n"
    )
