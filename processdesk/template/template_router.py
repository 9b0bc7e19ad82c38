# processdesk/template/template_router.py

import json
from functools import lru_cache
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from processdesk.config import FIXTURES_DIR

router = APIRouter(prefix="/templates", tags=["templates"])


class ProcessTemplate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    category: str
    complexity: str          # Simple / Medium / Complex
    tags: List[str] = []
    mermaid_code: str


@lru_cache(maxsize=1)
def load_templates() -> List[ProcessTemplate]:
    with open(FIXTURES_DIR / "process_templates.json", encoding="utf-8") as fh:
        return [ProcessTemplate.model_validate(t) for t in json.load(fh)]


@router.get("", response_model=list[ProcessTemplate])
def list_templates():
    return load_templates()


@router.get("/{template_id}", response_model=ProcessTemplate)
def get_template(template_id: str):
    for template in load_templates():
        if template.id == template_id:
            return template
    raise HTTPException(404, "Template not found")
