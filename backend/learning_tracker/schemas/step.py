"""Step Schemas — request/response models for step creation, update and deletion.

Invariants:
    - StepCreate.content emptiness is checked by StepService (domain ValidationError)
    - StepAiResponseUpdate.ai_response replaces the stored value; null clears it
    - StepDeletedResponse mirrors {message, deletedStep}
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StepCreate(_CamelModel):
    """Step creation payload."""
    content: str | None = None
    type: str | None = None
    ai_response: str | None = None


class StepAiResponseUpdate(_CamelModel):
    """Full replacement of a step's AI response."""
    ai_response: str | None = None


class StepResponse(_CamelModel):
    """Public-facing step data."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    project_id: UUID
    content: str
    type: str | None = None
    ai_response: str | None = None
    created_at: datetime


class StepDeletedResponse(_CamelModel):
    """Confirmation payload for DELETE /api/steps/{id}."""
    message: str
    deleted_step: StepResponse
