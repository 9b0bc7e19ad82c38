# processdesk/testing/test_case_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert, require_changes
from processdesk.schemas.test_case_schema import TestCaseCreate, TestCaseRead
from processdesk.storage.base import Storage
from processdesk.testing.uat_service import summarize_test_cases

router = APIRouter(tags=["test-cases"])


@router.get("/projects/{project_id}/test-cases", response_model=list[TestCaseRead])
def get_test_cases(project_id: int, storage: Storage = Depends(get_storage)):
    return storage.test_cases.list(project_id)


@router.post("/projects/{project_id}/test-cases", response_model=TestCaseRead)
def create_test_case(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    data = parse_insert(TestCaseCreate, payload, "Invalid test case data", project_id=project_id)
    return storage.test_cases.create(data)


@router.patch("/test-cases/{test_case_id}", response_model=TestCaseRead)
def update_test_case(
    test_case_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    changes = require_changes(payload, "Invalid test case data")
    test_case = storage.test_cases.update(test_case_id, changes)
    if not test_case:
        raise HTTPException(404, "Test case not found")
    return test_case


@router.get("/projects/{project_id}/test-summary")
def get_test_summary(project_id: int, storage: Storage = Depends(get_storage)):
    return {"projectId": project_id, **summarize_test_cases(storage.test_cases.list(project_id))}
