import re
from collections import Counter
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class RuleCategory(StrEnum):
    """Fixed set of categories a rule is grouped under for reporting."""

    CODE_QUALITY = "code_quality"
    TESTING = "testing"
    SECURITY = "security"
    DOCUMENTATION = "documentation"

    @classmethod
    def _missing_(cls, value: object) -> "RuleCategory | None":
        # Accept "CodeQuality", "code-quality", "Code Quality"
        if isinstance(value, str):
            normalized = re.sub(r"[\s_-]", "", value).lower()
            for member in cls:
                if member.value.replace("_", "") == normalized:
                    return member
        return None

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Outcome(StrEnum):
    """Result of a single rule for one evaluation run."""

    PASS = "pass"
    FAIL = "fail"
    NOT_EVALUATED = "not_evaluated"


class AggregateStatus(StrEnum):
    """Overall verdict of an evaluation run."""

    PASS = "pass"
    FAIL = "fail"


class RuleOutcome(BaseModel):
    """Outcome of one rule, carrying enough of the rule to report on it."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    category: RuleCategory
    description: str = ""
    required: bool = True
    outcome: Outcome

    @property
    def blocking(self) -> bool:
        """True when this outcome prevents the aggregate from passing."""
        return self.required and self.outcome != Outcome.PASS


class EvaluationResult(BaseModel):
    """
    Per-rule outcomes plus the aggregate verdict of one evaluation.

    Outcomes and failure lists follow the rule set's order. Ignored signals
    (entries naming no rule) are sorted so the result never depends on the
    key order of the signal mapping.
    """

    model_config = ConfigDict(frozen=True)

    rule_set: str | None = None
    status: AggregateStatus
    outcomes: tuple[RuleOutcome, ...]
    required_failures: tuple[str, ...] = ()
    optional_failures: tuple[str, ...] = ()
    ignored_signals: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == AggregateStatus.PASS

    def outcome_for(self, rule_id: str) -> Outcome:
        """Return the outcome of a rule; raises KeyError for unknown identifiers."""
        for rule_outcome in self.outcomes:
            if rule_outcome.rule_id == rule_id:
                return rule_outcome.outcome
        raise KeyError(rule_id)

    def by_category(self) -> dict[RuleCategory, list[RuleOutcome]]:
        """Group outcomes by category, in category declaration order, skipping empty ones."""
        groups: dict[RuleCategory, list[RuleOutcome]] = {category: [] for category in RuleCategory}
        for rule_outcome in self.outcomes:
            groups[rule_outcome.category].append(rule_outcome)
        return {category: items for category, items in groups.items() if items}

    def counts(self) -> dict[Outcome, int]:
        counter = Counter(rule_outcome.outcome for rule_outcome in self.outcomes)
        return {outcome: counter.get(outcome, 0) for outcome in Outcome}
