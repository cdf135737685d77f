from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from checkgate.core.errors import DuplicateRuleIdError, EmptyRuleSetError
from checkgate.core.models import RuleCategory


class Rule(BaseModel):
    """A single named, categorized criterion a change is checked against."""

    model_config = ConfigDict(frozen=True)

    # Signal keys are matched verbatim, so padded identifiers are rejected
    id: str = Field(min_length=1, pattern=r"^\S(.*\S)?$")
    category: RuleCategory
    description: str = ""
    required: bool = True  # False = advisory only

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return RuleCategory(value)
            except ValueError:
                return value
        return value


class RuleSet(BaseModel):
    """
    Ordered, immutable collection of rules defining a policy.

    Construction accepts any list of rules; check() enforces that the set is
    non-empty and that identifiers are unique.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    rules: tuple[Rule, ...] = ()

    @classmethod
    def of(cls, *rules: Rule, name: str | None = None) -> "RuleSet":
        return cls(name=name, rules=rules)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(rule.id for rule in self.rules)

    def check(self) -> "RuleSet":
        """Raise a ConfigurationError if the set is empty or has duplicate identifiers."""
        if not self.rules:
            raise EmptyRuleSetError(self.name)

        seen: set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise DuplicateRuleIdError(rule.id)
            seen.add(rule.id)
        return self

    def combine(self, other: "RuleSet", name: str | None = None) -> "RuleSet":
        """Return a new set with this set's rules followed by the other's."""
        return RuleSet(name=name, rules=self.rules + other.rules)
