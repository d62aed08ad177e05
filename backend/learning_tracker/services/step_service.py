"""Step Service — create, annotate and delete progress steps.

Invariants:
    - content must be present and non-empty, else ValidationError (whitespace is kept)
    - create_step requires an existing project (NotFoundError otherwise)
    - Omitted or empty type defaults to DEFAULT_STEP_TYPE ("note")
    - update_step_ai_response replaces the whole value; it never appends.
      An absent value (provided=False) is a no-op, an explicit None clears
    - delete_step returns the record as it was before removal
"""

import logging

from learning_tracker.core.domain_types import (
    DEFAULT_STEP_TYPE, parse_project_id, parse_step_id,
)
from learning_tracker.core.errors import ErrorContext, NotFoundError, ValidationError
from learning_tracker.core.records import StepRecord
from learning_tracker.core.repository_protocols import (
    ProjectRepository, StepLike, StepRepository,
)
from learning_tracker.services.record_mapping import to_step_record

logger = logging.getLogger(__name__)


class StepService:
    """Step operations over Step and Project repositories."""

    def __init__(self, steps: StepRepository, projects: ProjectRepository):
        self.steps = steps
        self.projects = projects

    async def create_step(
        self,
        project_id: str,
        content: str | None,
        step_type: str | None = None,
        ai_response: str | None = None,
    ) -> StepRecord:
        if not content:
            raise ValidationError("Content is required", fields=["content"])

        parsed = parse_project_id(project_id)
        if parsed is None or not await self.projects.exists(parsed):
            raise NotFoundError(
                "Project", project_id, ErrorContext(project_id=project_id),
            )

        row = await self.steps.add(
            project_id=parsed,
            content=content,
            step_type=step_type or DEFAULT_STEP_TYPE,
            ai_response=ai_response,
        )
        logger.info(
            "Step created",
            extra={"project_id": project_id, "step_id": str(row.id)},
        )
        return to_step_record(row)

    async def update_step_ai_response(
        self, step_id: str, ai_response: str | None, *, provided: bool = True,
    ) -> StepRecord:
        """Replace the AI response. provided=False leaves the stored value as is."""
        row = await self._get_or_404(step_id)
        if not provided:
            return to_step_record(row)
        row = await self.steps.set_ai_response(row, ai_response)
        logger.info("Step AI response updated", extra={"step_id": step_id})
        return to_step_record(row)

    async def delete_step(self, step_id: str) -> StepRecord:
        row = await self._get_or_404(step_id)
        # Snapshot before the row is gone
        deleted = to_step_record(row)
        await self.steps.delete(row)
        logger.info("Step deleted", extra={"step_id": step_id})
        return deleted

    async def _get_or_404(self, step_id: str) -> StepLike:
        parsed = parse_step_id(step_id)
        row = await self.steps.get(parsed) if parsed else None
        if row is None:
            raise NotFoundError("Step", step_id, ErrorContext(step_id=step_id))
        return row
