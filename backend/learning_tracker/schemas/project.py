"""Project Schemas — request/response models for the /api/projects endpoints.

Invariants:
    - ProjectCreate fields are optional at the schema level and stored as given;
      emptiness is checked by ProjectService so a missing title/goal yields the
      domain ValidationError
    - ProjectResponse always carries steps (possibly empty), ordered oldest first
    - Serialized with camelCase aliases (createdAt, updatedAt, aiResponse, ...)

Design Decisions:
    - from_attributes=True: responses built directly from core records
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from learning_tracker.schemas.step import StepResponse


class ProjectCreate(BaseModel):
    """Project creation payload — title and goal are required by the service."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    goal: str | None = None


class ProjectResponse(BaseModel):
    """Project with its ordered steps."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    title: str
    description: str | None = None
    goal: str
    created_at: datetime
    updated_at: datetime
    steps: list[StepResponse] = []
