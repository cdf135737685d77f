"""
Core error classes for checkgate.

Every fault raised by the evaluator or by the loaders that feed it is a
ConfigurationError. Individual rule failures are never raised; they are
reported in the EvaluationResult.
"""

from typing import Any


class ConfigurationError(Exception):
    """Base class for malformed rule sets, signals and rule sources."""

    code: str = "configuration_error"

    def __init__(self, message: str, rule_id: str | None = None) -> None:
        self.message = message
        self.rule_id = rule_id
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        details: dict[str, Any] = {}
        if self.rule_id is not None:
            details["rule_id"] = self.rule_id
        return {"code": self.code, "message": self.message, "details": details}


class EmptyRuleSetError(ConfigurationError):
    """Raised when a rule set contains no rules."""

    code = "empty_rule_set"

    def __init__(self, name: str | None = None) -> None:
        label = f"Rule set '{name}'" if name else "Rule set"
        super().__init__(f"{label} contains no rules")


class DuplicateRuleIdError(ConfigurationError):
    """Raised when two rules in a rule set share an identifier."""

    code = "duplicate_rule_id"

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Duplicate rule identifier: '{rule_id}'", rule_id=rule_id)


class InvalidSignalError(ConfigurationError):
    """Raised when a signal entry for a known rule is not a boolean."""

    code = "invalid_signal"

    def __init__(self, rule_id: str, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Signal for rule '{rule_id}' must be a boolean, got {type(value).__name__}: {value!r}",
            rule_id=rule_id,
        )


class RuleDefinitionError(ConfigurationError):
    """Raised when a rules file or rule entry cannot be parsed."""

    code = "invalid_rule_definition"

    def __init__(self, message: str, index: int | None = None, rule_id: str | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"Rule #{index}: {message}"
        super().__init__(message, rule_id=rule_id)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.index is not None:
            data["details"]["index"] = self.index
        return data


class RulesFileNotFoundError(ConfigurationError):
    """Raised when the rules file does not exist."""

    code = "rules_file_not_found"


class UnknownChecklistError(ConfigurationError):
    """Raised when a built-in checklist name is not recognised."""

    code = "unknown_checklist"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown checklist: '{name}'")


class SignalFormatError(ConfigurationError):
    """Raised when a signal source is not a mapping of rule id to outcome."""

    code = "invalid_signal_format"


class SignalFileNotFoundError(SignalFormatError):
    """Raised when a signal file does not exist."""

    code = "signal_file_not_found"
