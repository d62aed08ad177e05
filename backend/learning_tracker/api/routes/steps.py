"""Step Routes — replace a step's AI response, delete a step."""

import logging

from fastapi import APIRouter, Depends

from learning_tracker.api.dependencies import get_step_service
from learning_tracker.schemas.step import (
    StepAiResponseUpdate, StepDeletedResponse, StepResponse,
)
from learning_tracker.services.step_service import StepService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/steps", tags=["steps"])


@router.put("/{step_id}", response_model=StepResponse)
async def update_step(
    step_id: str,
    body: StepAiResponseUpdate,
    service: StepService = Depends(get_step_service),
):
    """Overwrite the step's AI response. null clears it, a missing key keeps it."""
    step = await service.update_step_ai_response(
        step_id, body.ai_response,
        provided="ai_response" in body.model_fields_set,
    )
    return StepResponse.model_validate(step)


@router.delete("/{step_id}", response_model=StepDeletedResponse)
async def delete_step(
    step_id: str,
    service: StepService = Depends(get_step_service),
):
    deleted = await service.delete_step(step_id)
    return StepDeletedResponse(
        message="Step deleted successfully",
        deleted_step=StepResponse.model_validate(deleted),
    )
