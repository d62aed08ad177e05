"""Service test fixtures — services wired to SQL repositories on the test session."""

import pytest

from learning_tracker.infrastructure.repositories import (
    SqlProjectRepository, SqlStepRepository,
)
from learning_tracker.services.project_service import ProjectService
from learning_tracker.services.step_service import StepService


@pytest.fixture
def project_service(test_db):
    return ProjectService(SqlProjectRepository(test_db))


@pytest.fixture
def step_service(test_db):
    return StepService(SqlStepRepository(test_db), SqlProjectRepository(test_db))


@pytest.fixture
async def seed_project(project_service):
    """A persisted project with no steps."""
    return await project_service.create_project(
        title="Learn Go", goal="Ship a CLI",
    )
