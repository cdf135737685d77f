"""Evaluation and rules validation endpoints."""

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field, model_validator

from checkgate.core.config import config
from checkgate.core.utils.logging import log_structured
from checkgate.presentation.formatter import format_evaluation_output
from checkgate.rules.checklists import get_checklist
from checkgate.rules.evaluator import compliance_evaluator
from checkgate.rules.models import Rule, RuleSet
from checkgate.rules.utils.validation import validate_rules_yaml

router = APIRouter()
logger = logging.getLogger(__name__)


class EvaluationRequest(BaseModel):
    checklist: str | None = None
    rules: list[Rule] | None = None
    name: str | None = None  # Name reported for inline rules
    signal: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_rule_source(self) -> "EvaluationRequest":
        if self.checklist is not None and self.rules is not None:
            raise ValueError("Provide either 'checklist' or 'rules', not both")
        return self

    def resolve_rule_set(self) -> RuleSet:
        if self.rules is not None:
            return RuleSet(name=self.name, rules=tuple(self.rules))
        # An explicit empty name is looked up, not replaced by the default
        return get_checklist(self.checklist if self.checklist is not None else config.default_checklist)


class RulesValidationRequest(BaseModel):
    content: str


@router.post("/evaluate")
async def evaluate_change(request: EvaluationRequest) -> dict[str, Any]:
    """Evaluate a signal against a built-in checklist or inline rules."""
    rule_set = request.resolve_rule_set()
    result = compliance_evaluator.evaluate(rule_set, request.signal)

    log_structured(
        logger,
        "evaluation_completed",
        operation="evaluate",
        rule_set=result.rule_set,
        status=result.status.value,
        required_failures=list(result.required_failures),
    )

    return {
        "result": result.model_dump(mode="json"),
        "report": format_evaluation_output(result),
    }


@router.post("/rules/validate")
async def validate_rules(request: RulesValidationRequest) -> dict[str, Any]:
    validation = validate_rules_yaml(request.content)
    log_structured(logger, "rules_validated", operation="validate_rules", success=validation["success"])
    return validation
