"""
Built-in checklist loader.
"""

from checkgate.rules.checklists import get_checklist
from checkgate.rules.interface import RuleLoader
from checkgate.rules.models import RuleSet


class ChecklistRuleLoader(RuleLoader):
    """Resolves a built-in checklist name to its rule set."""

    def get_rules(self, source: str) -> RuleSet:
        return get_checklist(source).check()


checklist_rule_loader = ChecklistRuleLoader()
