# processdesk/cost/cost_item_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from processdesk.cost.cost_service import summarize_costs
from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert, require_changes
from processdesk.schemas.cost_item_schema import CostItemCreate, CostItemRead
from processdesk.storage.base import Storage

router = APIRouter(tags=["cost-items"])


@router.get("/projects/{project_id}/cost-items", response_model=list[CostItemRead])
def get_cost_items(project_id: int, storage: Storage = Depends(get_storage)):
    return storage.cost_items.list(project_id)


@router.post("/projects/{project_id}/cost-items", response_model=CostItemRead)
def create_cost_item(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    data = parse_insert(CostItemCreate, payload, "Invalid cost item data", project_id=project_id)
    return storage.cost_items.create(data)


@router.patch("/cost-items/{cost_item_id}", response_model=CostItemRead)
def update_cost_item(
    cost_item_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    changes = require_changes(payload, "Invalid cost item data")
    cost_item = storage.cost_items.update(cost_item_id, changes)
    if not cost_item:
        raise HTTPException(404, "Cost item not found")
    return cost_item


@router.get("/projects/{project_id}/cost-summary")
def get_cost_summary(project_id: int, storage: Storage = Depends(get_storage)):
    return {"projectId": project_id, **summarize_costs(storage.cost_items.list(project_id))}
