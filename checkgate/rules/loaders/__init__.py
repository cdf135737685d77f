from checkgate.rules.loaders.checklist_loader import ChecklistRuleLoader, checklist_rule_loader
from checkgate.rules.loaders.yaml_loader import YamlRuleLoader, parse_rules, yaml_rule_loader

__all__ = [
    "ChecklistRuleLoader",
    "YamlRuleLoader",
    "checklist_rule_loader",
    "parse_rules",
    "yaml_rule_loader",
]
