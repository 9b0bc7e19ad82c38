# processdesk/storage/seed.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Tuple, Type, Union

from processdesk.schemas.activity_schema import ActivityCreate
from processdesk.schemas.base_schema import InsertSchema
from processdesk.schemas.cost_item_schema import CostItemCreate
from processdesk.schemas.process_schema import ProcessCreate
from processdesk.schemas.project_schema import ProjectCreate
from processdesk.schemas.requirement_schema import RequirementCreate
from processdesk.schemas.team_member_schema import TeamMemberCreate
from processdesk.schemas.test_case_schema import TestCaseCreate

if TYPE_CHECKING:
    from processdesk.storage.base import Storage

logger = logging.getLogger("processdesk.seed")

# fixture key -> (storage collection attribute, insert schema)
CHILD_KINDS: Dict[str, Tuple[str, Type[InsertSchema]]] = {
    "teamMembers": ("team_members", TeamMemberCreate),
    "processes": ("processes", ProcessCreate),
    "requirements": ("requirements", RequirementCreate),
    "testCases": ("test_cases", TestCaseCreate),
    "costItems": ("cost_items", CostItemCreate),
    "activities": ("activities", ActivityCreate),
}


def load_seed_fixture(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def seed_storage(storage: "Storage", dataset: Mapping[str, Any]) -> bool:
    """
    Populate an empty store with the demonstration dataset.

    Returns False without touching anything when at least one project
    exists. The inserts are independent: a failure half way leaves the
    records created so far in place.
    """
    if storage.projects.list():
        logger.info("seed_skipped", extra={"reason": "projects_exist"})
        return False

    counts = {"projects": 0}
    for entry in dataset.get("projects", []):
        fields = {k: v for k, v in entry.items() if k not in CHILD_KINDS}
        project = storage.projects.create(ProjectCreate.model_validate(fields))
        counts["projects"] += 1

        for key, (attr, schema) in CHILD_KINDS.items():
            collection = getattr(storage, attr)
            for child in entry.get(key, []):
                data = schema.model_validate({**child, "projectId": project.id})
                collection.create(data)
                counts[key] = counts.get(key, 0) + 1

    logger.info("seed_completed", extra={"counts": counts})
    return True
