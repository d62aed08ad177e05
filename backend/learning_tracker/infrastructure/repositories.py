"""SQL Repositories — SQLAlchemy implementations of the core repository protocols.

Invariants:
    - Each mutating call is its own transaction: add/flush/commit or rollback
    - SQLAlchemyError → rollback → PersistenceError (original chained as __cause__)
    - Read queries use populate_existing so identity-mapped projects never
      return a stale steps collection

Design Decisions:
    - One repository per aggregate, constructed per request around an AsyncSession
    - Steps eagerly loaded through the Project.steps selectin relationship
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from learning_tracker.core.domain_types import ProjectId, StepId
from learning_tracker.core.errors import PersistenceError
from learning_tracker.models.project import Project
from learning_tracker.models.step import Step

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _persistence_guard(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Roll back and raise PersistenceError on any SQLAlchemy failure."""
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Database error during {operation}: {e}",
            extra={"operation": operation},
        )
        raise PersistenceError(operation) from e


class SqlProjectRepository:
    """Project persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_with_steps(self) -> Sequence[Project]:
        async with _persistence_guard(self.db, "fetch projects"):
            result = await self.db.execute(
                select(Project)
                .order_by(Project.created_at.desc())
                .execution_options(populate_existing=True),
            )
            return result.scalars().all()

    async def get_with_steps(self, project_id: ProjectId) -> Project | None:
        async with _persistence_guard(self.db, "fetch project"):
            result = await self.db.execute(
                select(Project)
                .where(Project.id == project_id)
                .execution_options(populate_existing=True),
            )
            return result.scalar_one_or_none()

    async def exists(self, project_id: ProjectId) -> bool:
        async with _persistence_guard(self.db, "fetch project"):
            result = await self.db.execute(
                select(Project.id).where(Project.id == project_id),
            )
            return result.scalar_one_or_none() is not None

    async def add(
        self, *, title: str, description: str | None, goal: str,
    ) -> Project:
        async with _persistence_guard(self.db, "create project"):
            project = Project(title=title, description=description, goal=goal)
            self.db.add(project)
            await self.db.commit()
            await self.db.refresh(project)
            return project


class SqlStepRepository:
    """Step persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, step_id: StepId) -> Step | None:
        async with _persistence_guard(self.db, "fetch step"):
            result = await self.db.execute(
                select(Step).where(Step.id == step_id),
            )
            return result.scalar_one_or_none()

    async def add(
        self,
        *,
        project_id: ProjectId,
        content: str,
        step_type: str,
        ai_response: str | None,
    ) -> Step:
        async with _persistence_guard(self.db, "create step"):
            step = Step(
                project_id=project_id,
                content=content,
                type=step_type,
                ai_response=ai_response,
            )
            self.db.add(step)
            await self.db.commit()
            await self.db.refresh(step)
            return step

    async def set_ai_response(self, step: Step, ai_response: str | None) -> Step:
        async with _persistence_guard(self.db, "update step"):
            step.ai_response = ai_response
            await self.db.commit()
            await self.db.refresh(step)
            return step

    async def delete(self, step: Step) -> None:
        async with _persistence_guard(self.db, "delete step"):
            await self.db.delete(step)
            await self.db.commit()
