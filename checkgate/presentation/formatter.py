from typing import Any

from checkgate.core.errors import ConfigurationError
from checkgate.core.models import EvaluationResult, Outcome, RuleOutcome

OUTCOME_EMOJI = {
    Outcome.PASS: "✅",
    Outcome.FAIL: "❌",
    Outcome.NOT_EVALUATED: "⚪",
}

# Exit codes for reporting surfaces
EXIT_PASS = 0
EXIT_FAIL = 1
EXIT_CONFIGURATION_ERROR = 2


def exit_code_for(result: EvaluationResult) -> int:
    return EXIT_PASS if result.passed else EXIT_FAIL


def _format_rule_line(rule_outcome: RuleOutcome) -> str:
    emoji = OUTCOME_EMOJI.get(rule_outcome.outcome, "⚪")
    weight = "required" if rule_outcome.required else "optional"
    line = f"- {emoji} `{rule_outcome.rule_id}` ({weight})"
    if rule_outcome.description:
        line += f": {rule_outcome.description}"
    if rule_outcome.outcome == Outcome.NOT_EVALUATED:
        line += " _(not evaluated)_"
    return line


def format_evaluation_output(result: EvaluationResult) -> dict[str, Any]:
    """Format an evaluation result as a check-run style title, summary and Markdown text."""
    counts = result.counts()
    label = f"`{result.rule_set}`" if result.rule_set else "configured"

    if result.passed:
        title = "All required checks passed"
        summary = f"✅ {counts[Outcome.PASS]} of {len(result.outcomes)} checks passed"
        if result.optional_failures:
            summary += f", {len(result.optional_failures)} advisory"
    else:
        title = f"{len(result.required_failures)} required checks not satisfied"
        summary = f"🚨 {len(result.required_failures)} blocking: {', '.join(result.required_failures)}"

    text = f"# Compliance report for {label} rules\n\n"

    for category, items in result.by_category().items():
        text += f"## {category.label}\n\n"
        for rule_outcome in items:
            text += _format_rule_line(rule_outcome) + "\n"
        text += "\n"

    if result.required_failures:
        text += "### 🚫 Blocking\n\n"
        for rule_outcome in result.outcomes:
            if not rule_outcome.blocking:
                continue
            reason = "not evaluated" if rule_outcome.outcome == Outcome.NOT_EVALUATED else "failed"
            text += f"- `{rule_outcome.rule_id}` {reason}\n"
        text += "\n"

    if result.optional_failures:
        text += "### ⚠️ Advisory\n\n"
        for rule_id in result.optional_failures:
            text += f"- `{rule_id}` failed\n"
        text += "\n"

    if result.ignored_signals:
        text += f"*Ignored signals for unknown rules: {', '.join(result.ignored_signals)}*\n\n"

    text += "---\n"
    text += "*Required checks that were not measured block the change until a signal is supplied.*"

    return {"title": title, "summary": summary, "text": text}


def format_configuration_error(error: ConfigurationError) -> dict[str, Any]:
    """Format a configuration fault with the same shape as an evaluation report."""
    text = f"The rules or signal could not be evaluated:\n\n```\n{error.message}\n```\n"
    if error.rule_id:
        text += f"\nOffending rule: `{error.rule_id}`\n"
    return {
        "title": "Invalid configuration",
        "summary": f"❌ Error: {error.message}",
        "text": text,
    }
