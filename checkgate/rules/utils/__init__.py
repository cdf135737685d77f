from checkgate.rules.utils.validation import validate_rules_file, validate_rules_yaml

__all__ = [
    "validate_rules_file",
    "validate_rules_yaml",
]
