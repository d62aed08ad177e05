"""SQL Export — pure formatter that renders a project tree as SQL text with an AI prompt.

Invariants:
    - Pure and deterministic given (project, exported_at, locale)
    - Output order: header comments, prompt block, project INSERT, step INSERTs
    - String literals: ' doubled, newline → backslash-n, nothing else touched
    - Empty or missing nullable values render as NULL
    - Step INSERTs follow the order of ProjectRecord.steps

Design Decisions:
    - Narrow escaping only: the output targets a paste-into-chat workflow, not a SQL driver
    - Comment lines get newline escaping only, so one value never spans two lines
    - Timestamps rendered as UTC with millisecond precision and a Z suffix;
      naive datetimes (SQLite) are treated as UTC
"""

from datetime import datetime, timezone

from learning_tracker.core.domain_types import ExportLocale
from learning_tracker.core.export_prompts import render_prompt
from learning_tracker.core.records import ProjectRecord, StepRecord

EXPORT_LABEL = "Learning Tracker Export"
SQL_NULL = "NULL"

_PROJECT_COLUMNS = "id, createdAt, updatedAt, title, description, goal"
_STEP_COLUMNS = "id, createdAt, projectId, content, aiResponse, type"


def escape_sql(value: str) -> str:
    """Double single quotes and replace newlines with a literal backslash-n."""
    return value.replace("'", "''").replace("\n", "\\n")


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-01-31T09:15:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def export_filename(project: ProjectRecord) -> str:
    return f"project-{project.id}.sql"


def format_export(
    project: ProjectRecord,
    *,
    exported_at: datetime | None = None,
    locale: ExportLocale = ExportLocale.EN,
) -> str:
    """Render the full export document for one project."""
    exported_at = exported_at or datetime.now(timezone.utc)
    parts = [
        _format_header(project, exported_at),
        "\n",
        render_prompt(
            locale,
            goal=_comment_safe(project.goal),
            description=_comment_safe(project.description) if project.description else None,
            step_count=project.step_count,
        ),
        "\n\n",
        _format_project_insert(project),
    ]
    if project.steps:
        parts.append("-- Steps data\n")
        parts.extend(_format_step_insert(step) for step in project.steps)
    return "".join(parts)


def _format_header(project: ProjectRecord, exported_at: datetime) -> str:
    return (
        f"-- {EXPORT_LABEL}\n"
        f"-- Project: {_comment_safe(project.title)}\n"
        f"-- Export Date: {format_timestamp(exported_at)}\n"
        f"-- Total Steps: {project.step_count}\n"
    )


def _format_project_insert(project: ProjectRecord) -> str:
    values = [
        _literal(str(project.id)),
        _literal(format_timestamp(project.created_at)),
        _literal(format_timestamp(project.updated_at)),
        _literal(project.title),
        _nullable(project.description),
        _literal(project.goal),
    ]
    return "-- Project data\n" + _insert("projects", _PROJECT_COLUMNS, values) + "\n"


def _format_step_insert(step: StepRecord) -> str:
    values = [
        _literal(str(step.id)),
        _literal(format_timestamp(step.created_at)),
        _literal(str(step.project_id)),
        _literal(step.content),
        _nullable(step.ai_response),
        _nullable(step.type),
    ]
    return _insert("steps", _STEP_COLUMNS, values)


def _insert(table: str, columns: str, values: list[str]) -> str:
    rendered = ",\n".join(f"  {value}" for value in values)
    return f"INSERT INTO {table} ({columns}) VALUES (\n{rendered}\n);\n"


def _literal(value: str) -> str:
    return f"'{escape_sql(value)}'"


def _nullable(value: str | None) -> str:
    # Empty strings are treated as absent
    return _literal(value) if value else SQL_NULL


def _comment_safe(value: str) -> str:
    return value.replace("\n", "\\n")
