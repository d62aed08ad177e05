"""Request Dependencies — database session and service wiring for route handlers.

Invariants:
    - The DatabaseSessionManager lives on app.state (set by the lifespan)
    - One AsyncSession per request, closed when the response is done
    - Services are constructed per request around that session
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from learning_tracker.infrastructure.database import DatabaseSessionManager
from learning_tracker.infrastructure.repositories import (
    SqlProjectRepository, SqlStepRepository,
)
from learning_tracker.services.project_service import ProjectService
from learning_tracker.services.step_service import StepService


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


async def get_db(
    manager: DatabaseSessionManager | None = Depends(get_db_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(SqlProjectRepository(db))


def get_step_service(db: AsyncSession = Depends(get_db)) -> StepService:
    return StepService(SqlStepRepository(db), SqlProjectRepository(db))
