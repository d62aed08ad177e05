"""Project Routes — list/create/get projects, export as SQL, add steps.

Invariants:
    - Path ids are opaque strings; malformed ids resolve to 404, not 400
    - Export responds with text/sql and an attachment Content-Disposition
    - Handlers only translate between schemas and services
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from learning_tracker.api.dependencies import get_project_service, get_step_service
from learning_tracker.config import get_settings
from learning_tracker.core.domain_types import ExportLocale
from learning_tracker.schemas.project import ProjectCreate, ProjectResponse
from learning_tracker.schemas.step import StepCreate, StepResponse
from learning_tracker.services.project_service import ProjectService
from learning_tracker.services.step_service import StepService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["projects"])

SQL_MEDIA_TYPE = "text/sql"


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    service: ProjectService = Depends(get_project_service),
):
    """List all projects, newest first, each with its steps."""
    projects = await service.list_projects()
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post("", response_model=ProjectResponse)
async def create_project(
    body: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
):
    """Create a project. title and goal are required."""
    project = await service.create_project(
        title=body.title, goal=body.goal, description=body.description,
    )
    return ProjectResponse.model_validate(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.get_project(project_id)
    return ProjectResponse.model_validate(project)


@router.get("/{project_id}/export")
async def export_project(
    project_id: str,
    locale: ExportLocale | None = Query(None),
    service: ProjectService = Depends(get_project_service),
):
    """Download the project as SQL with an embedded AI prompt."""
    filename, sql = await service.export_project(
        project_id, locale or get_settings().export_locale,
    )
    return Response(
        content=sql,
        media_type=SQL_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{project_id}/steps", response_model=StepResponse)
async def create_step(
    project_id: str,
    body: StepCreate,
    service: StepService = Depends(get_step_service),
):
    """Append a step to a project. type defaults to "note"."""
    step = await service.create_step(
        project_id,
        content=body.content,
        step_type=body.type,
        ai_response=body.ai_response,
    )
    return StepResponse.model_validate(step)
