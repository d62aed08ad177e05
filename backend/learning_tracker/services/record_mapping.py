"""Record Mapping — converts stored rows into immutable core records.

Invariants:
    - Step order is preserved exactly as loaded (created_at ascending)
"""

from learning_tracker.core.domain_types import ProjectId, StepId
from learning_tracker.core.records import ProjectRecord, StepRecord
from learning_tracker.core.repository_protocols import ProjectLike, StepLike


def to_step_record(step: StepLike) -> StepRecord:
    return StepRecord(
        id=StepId(step.id),
        project_id=ProjectId(step.project_id),
        content=step.content,
        created_at=step.created_at,
        type=step.type,
        ai_response=step.ai_response,
    )


def to_project_record(project: ProjectLike, *, include_steps: bool = True) -> ProjectRecord:
    steps = tuple(to_step_record(s) for s in project.steps) if include_steps else ()
    return ProjectRecord(
        id=ProjectId(project.id),
        title=project.title,
        goal=project.goal,
        created_at=project.created_at,
        updated_at=project.updated_at,
        description=project.description,
        steps=steps,
    )
