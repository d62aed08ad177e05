"""Project Service — list, create, fetch and export learning projects.

Invariants:
    - title and goal must be present and non-empty, else ValidationError (no trimming)
    - Unknown or malformed project ids raise NotFoundError before any formatting
    - Listing is newest-first; steps inside each project are oldest-first
    - Persistence failures surface as PersistenceError (raised by the repository)

Design Decisions:
    - Export timestamp injectable (clock) so exports are reproducible in tests
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from learning_tracker.core.domain_types import ExportLocale, parse_project_id
from learning_tracker.core.errors import ErrorContext, NotFoundError, ValidationError
from learning_tracker.core.export_sql import export_filename, format_export
from learning_tracker.core.records import ProjectRecord
from learning_tracker.core.repository_protocols import ProjectRepository
from learning_tracker.services.record_mapping import to_project_record

logger = logging.getLogger(__name__)


class ProjectService:
    """Project operations over a ProjectRepository."""

    def __init__(
        self,
        projects: ProjectRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.projects = projects
        self.clock = clock

    async def list_projects(self) -> list[ProjectRecord]:
        rows = await self.projects.list_with_steps()
        return [to_project_record(row) for row in rows]

    async def create_project(
        self, title: str | None, goal: str | None, description: str | None = None,
    ) -> ProjectRecord:
        """Validate required fields and persist a new project."""
        missing = [
            name for name, value in (("title", title), ("goal", goal))
            if not value
        ]
        if missing:
            raise ValidationError("Title and goal are required", fields=missing)

        row = await self.projects.add(
            title=title, description=description, goal=goal,
        )
        logger.info("Project created", extra={"project_id": str(row.id)})
        # A new project has no steps
        return to_project_record(row, include_steps=False)

    async def get_project(self, project_id: str) -> ProjectRecord:
        parsed = parse_project_id(project_id)
        row = await self.projects.get_with_steps(parsed) if parsed else None
        if row is None:
            raise NotFoundError(
                "Project", project_id, ErrorContext(project_id=project_id),
            )
        return to_project_record(row)

    async def export_project(
        self, project_id: str, locale: ExportLocale = ExportLocale.EN,
    ) -> tuple[str, str]:
        """Return (filename, sql_text) for the project's export."""
        project = await self.get_project(project_id)
        sql = format_export(project, exported_at=self.clock(), locale=locale)
        logger.info(
            f"Project exported ({project.step_count} steps, locale={locale.value})",
            extra={"project_id": str(project.id)},
        )
        return export_filename(project), sql
