"""Boundary Protocols — persistence contracts between services and infrastructure.

Invariants:
    - Services depend on these Protocols, never on concrete repositories
    - Lookups return None for unknown ids; raising NotFoundError is the service's job
    - Implementations translate store failures into PersistenceError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Methods return ORM-like objects typed by ProjectLike/StepLike so services
      can map them into records without importing the ORM
"""

from datetime import datetime
from typing import Protocol, Sequence
from uuid import UUID

from learning_tracker.core.domain_types import ProjectId, StepId


class StepLike(Protocol):
    """Structural contract for stored Step rows."""
    id: UUID
    project_id: UUID
    content: str
    type: str | None
    ai_response: str | None
    created_at: datetime


class ProjectLike(Protocol):
    """Structural contract for stored Project rows with their steps loaded."""
    id: UUID
    title: str
    description: str | None
    goal: str
    created_at: datetime
    updated_at: datetime

    @property
    def steps(self) -> Sequence[StepLike]: ...


class ProjectRepository(Protocol):
    """Contract for project persistence — implemented by infrastructure."""
    async def list_with_steps(self) -> Sequence[ProjectLike]: ...
    async def get_with_steps(self, project_id: ProjectId) -> ProjectLike | None: ...
    async def exists(self, project_id: ProjectId) -> bool: ...
    async def add(
        self, *, title: str, description: str | None, goal: str,
    ) -> ProjectLike: ...


class StepRepository(Protocol):
    """Contract for step persistence — implemented by infrastructure."""
    async def get(self, step_id: StepId) -> StepLike | None: ...
    async def add(
        self,
        *,
        project_id: ProjectId,
        content: str,
        step_type: str,
        ai_response: str | None,
    ) -> StepLike: ...
    async def set_ai_response(
        self, step: StepLike, ai_response: str | None,
    ) -> StepLike: ...
    async def delete(self, step: StepLike) -> None: ...
