"""Built-in checklist endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, status

from checkgate.core.errors import UnknownChecklistError
from checkgate.rules.checklists import CHECKLISTS, get_checklist

router = APIRouter(prefix="/checklists", tags=["Checklists"])


@router.get("", summary="List built-in checklists")
async def list_checklists() -> list[dict[str, Any]]:
    return [
        {
            "name": checklist.value,
            "rule_count": len(rule_set.rules),
            "required_count": sum(1 for rule in rule_set.rules if rule.required),
        }
        for checklist, rule_set in CHECKLISTS.items()
    ]


@router.get("/{name}", summary="Show a built-in checklist")
async def show_checklist(name: str) -> dict[str, Any]:
    try:
        rule_set = get_checklist(name)
    except UnknownChecklistError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return rule_set.model_dump(mode="json")
