# Rules package

from checkgate.core.models import RuleCategory
from checkgate.rules.models import Rule, RuleSet

__all__ = [
    "Rule",
    "RuleCategory",
    "RuleSet",
]
