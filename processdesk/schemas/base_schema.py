# processdesk/schemas/base_schema.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# --------- Insert payloads (POST bodies) ---------
# camelCase on the wire, unknown keys and JSON type mismatches rejected
class InsertSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        strict=True,
    )


# --------- Stored records (GET responses) ---------
# PATCH merges unvalidated keys, so records keep whatever extra keys they get
class RecordSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="allow",
    )

    id: int


class ProjectScopedRecord(RecordSchema):
    project_id: int
