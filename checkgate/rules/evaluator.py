"""
Compliance evaluation of a signal against a rule set.

The evaluator is a pure function: it performs no I/O, does not log and never
mutates its inputs. Rule failures are reported as data in the returned
EvaluationResult; only malformed configuration raises.
"""

from collections.abc import Mapping
from typing import Any

from checkgate.core.errors import InvalidSignalError
from checkgate.core.models import AggregateStatus, EvaluationResult, Outcome, RuleOutcome
from checkgate.rules.models import RuleSet

Signal = Mapping[str, Any]


def evaluate(rule_set: RuleSet, signal: Signal) -> EvaluationResult:
    """
    Score one signal against one rule set.

    Args:
        rule_set: Non-empty rule set with unique identifiers.
        signal: Mapping of rule identifier to observed boolean outcome. May be
            partial; rules without an entry are NotEvaluated.

    Returns:
        EvaluationResult with per-rule outcomes in rule-set order and the
        aggregate status (Pass only if every required rule passed).

    Raises:
        EmptyRuleSetError: The rule set has no rules.
        DuplicateRuleIdError: Two rules share an identifier.
        InvalidSignalError: A signal entry for a known rule is not a bool.
    """
    rule_set.check()

    # Validate before scoring so a bad entry is reported by rule order, not key order
    for rule in rule_set.rules:
        if rule.id in signal and not isinstance(signal[rule.id], bool):
            raise InvalidSignalError(rule.id, signal[rule.id])

    outcomes: list[RuleOutcome] = []
    required_failures: list[str] = []
    optional_failures: list[str] = []

    for rule in rule_set.rules:
        if rule.id not in signal:
            outcome = Outcome.NOT_EVALUATED
        elif signal[rule.id]:
            outcome = Outcome.PASS
        else:
            outcome = Outcome.FAIL

        rule_outcome = RuleOutcome(
            rule_id=rule.id,
            category=rule.category,
            description=rule.description,
            required=rule.required,
            outcome=outcome,
        )
        outcomes.append(rule_outcome)

        if rule_outcome.blocking:
            # Unmeasured requirements block just like failed ones
            required_failures.append(rule.id)
        elif not rule.required and outcome == Outcome.FAIL:
            optional_failures.append(rule.id)

    known = set(rule_set.ids)
    ignored = sorted(key for key in signal if key not in known)

    return EvaluationResult(
        rule_set=rule_set.name,
        status=AggregateStatus.FAIL if required_failures else AggregateStatus.PASS,
        outcomes=tuple(outcomes),
        required_failures=tuple(required_failures),
        optional_failures=tuple(optional_failures),
        ignored_signals=tuple(ignored),
    )


class ComplianceEvaluator:
    """Stateless evaluator; safe to share between threads and requests."""

    def evaluate(self, rule_set: RuleSet, signal: Signal) -> EvaluationResult:
        return evaluate(rule_set, signal)


compliance_evaluator = ComplianceEvaluator()
