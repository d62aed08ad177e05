"""Typed Records — immutable snapshots of projects and steps passed between layers.

Invariants:
    - Records are frozen; services build them, formatter and routes only read them
    - ProjectRecord.steps is ordered by created_at ascending
    - No dependency on ORM or Pydantic (core stays pure)
"""

from dataclasses import dataclass, field
from datetime import datetime

from learning_tracker.core.domain_types import ProjectId, StepId


@dataclass(frozen=True)
class StepRecord:
    """One progress entry under a project."""
    id: StepId
    project_id: ProjectId
    content: str
    created_at: datetime
    type: str | None = None
    ai_response: str | None = None


@dataclass(frozen=True)
class ProjectRecord:
    """A project with its ordered steps."""
    id: ProjectId
    title: str
    goal: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    steps: tuple[StepRecord, ...] = field(default_factory=tuple)

    @property
    def step_count(self) -> int:
        return len(self.steps)
