"""SQL export tests — pure tests for escape_sql and format_export.

Tests cover:
    - Escaping doubles quotes and turns newlines into literal backslash-n, nothing else
    - Header block carries label, title, timestamp and step count
    - Project INSERT column order and NULL description
    - Zero steps → no step INSERT, no "Steps data" section
    - Step INSERTs keep the supplied order; empty aiResponse/type render as NULL
    - Prompt interpolates goal, description placeholder and step count per locale
    - Comment lines stay single-line when values contain newlines
"""

from datetime import datetime, timezone
from uuid import UUID

from learning_tracker.core.domain_types import ExportLocale
from learning_tracker.core.export_sql import (
    escape_sql, export_filename, format_export, format_timestamp,
)
from learning_tracker.core.records import ProjectRecord, StepRecord

PROJECT_ID = UUID("11111111-1111-1111-1111-111111111111")
EXPORTED_AT = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
CREATED_AT = datetime(2024, 4, 1, 8, 0, 0, tzinfo=timezone.utc)


def _step(n: int, content: str, **kwargs) -> StepRecord:
    return StepRecord(
        id=UUID(f"00000000-0000-0000-0000-00000000000{n}"),
        project_id=PROJECT_ID,
        content=content,
        created_at=datetime(2024, 4, 2, 9, n, 0, tzinfo=timezone.utc),
        **kwargs,
    )


def _project(steps=(), description=None, title="Learn Go", goal="Ship a CLI") -> ProjectRecord:
    return ProjectRecord(
        id=PROJECT_ID,
        title=title,
        goal=goal,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
        description=description,
        steps=tuple(steps),
    )


# --- escape_sql ---------------------------------------------------------------

def test_escape_doubles_quote_and_escapes_newline():
    assert escape_sql("It's great\nreally") == "It''s great\\nreally"


def test_escape_leaves_other_characters_untouched():
    raw = 'tab\there "double" back\\slash \r % _ ; --'
    assert escape_sql(raw) == raw


def test_escape_handles_consecutive_quotes_and_newlines():
    assert escape_sql("''\n\n") == "''''\\n\\n"


# --- timestamps ---------------------------------------------------------------

def test_timestamp_is_utc_millisecond_iso():
    assert format_timestamp(EXPORTED_AT) == "2024-05-01T12:30:45.123Z"


def test_naive_timestamp_treated_as_utc():
    naive = datetime(2024, 1, 2, 3, 4, 5)
    assert format_timestamp(naive) == "2024-01-02T03:04:05.000Z"


# --- header -------------------------------------------------------------------

def test_header_block_lines():
    sql = format_export(_project(steps=[_step(1, "a")]), exported_at=EXPORTED_AT)
    lines = sql.splitlines()
    assert lines[:5] == [
        "-- Learning Tracker Export",
        "-- Project: Learn Go",
        "-- Export Date: 2024-05-01T12:30:45.123Z",
        "-- Total Steps: 1",
        "",
    ]


def test_export_date_defaults_to_now():
    sql = format_export(_project())
    assert "-- Export Date: " in sql
    assert "2024-05-01T12:30:45.123Z" not in sql


# --- project insert -----------------------------------------------------------

def test_project_insert_column_order_and_null_description():
    sql = format_export(_project(), exported_at=EXPORTED_AT)
    expected = (
        "-- Project data\n"
        "INSERT INTO projects (id, createdAt, updatedAt, title, description, goal) VALUES (\n"
        "  '11111111-1111-1111-1111-111111111111',\n"
        "  '2024-04-01T08:00:00.000Z',\n"
        "  '2024-04-01T08:00:00.000Z',\n"
        "  'Learn Go',\n"
        "  NULL,\n"
        "  'Ship a CLI'\n"
        ");\n"
    )
    assert expected in sql


def test_project_description_is_escaped_when_present():
    sql = format_export(
        _project(description="Go's\nconcurrency"), exported_at=EXPORTED_AT,
    )
    assert "  'Go''s\\nconcurrency',\n" in sql


def test_empty_description_renders_null():
    sql = format_export(_project(description=""), exported_at=EXPORTED_AT)
    assert "  'Learn Go',\n  NULL,\n" in sql


# --- steps --------------------------------------------------------------------

def test_zero_steps_has_project_insert_only():
    sql = format_export(_project(), exported_at=EXPORTED_AT)
    assert sql.count("INSERT INTO projects") == 1
    assert "INSERT INTO steps" not in sql
    assert "-- Steps data" not in sql
    assert sql.endswith(");\n\n")


def test_step_inserts_follow_supplied_order():
    steps = [_step(1, "Read docs"), _step(2, "Wrote hello world")]
    sql = format_export(_project(steps=steps), exported_at=EXPORTED_AT)
    assert sql.count("INSERT INTO steps") == 2
    assert sql.index("'Read docs'") < sql.index("'Wrote hello world'")


def test_step_insert_layout():
    step = _step(1, "It's great\nreally", type="note", ai_response="Good job")
    sql = format_export(_project(steps=[step]), exported_at=EXPORTED_AT)
    expected = (
        "-- Steps data\n"
        "INSERT INTO steps (id, createdAt, projectId, content, aiResponse, type) VALUES (\n"
        "  '00000000-0000-0000-0000-000000000001',\n"
        "  '2024-04-02T09:01:00.000Z',\n"
        "  '11111111-1111-1111-1111-111111111111',\n"
        "  'It''s great\\nreally',\n"
        "  'Good job',\n"
        "  'note'\n"
        ");\n"
    )
    assert sql.endswith(expected)


def test_missing_ai_response_and_type_render_null():
    sql = format_export(
        _project(steps=[_step(1, "x", type="", ai_response=None)]),
        exported_at=EXPORTED_AT,
    )
    assert "  'x',\n  NULL,\n  NULL\n);\n" in sql


def test_blank_line_between_project_and_steps():
    sql = format_export(_project(steps=[_step(1, "x")]), exported_at=EXPORTED_AT)
    assert "'Ship a CLI'\n);\n\n-- Steps data\n" in sql


# --- prompt -------------------------------------------------------------------

def test_english_prompt_interpolates_goal_and_count():
    sql = format_export(
        _project(steps=[_step(1, "a"), _step(2, "b")]), exported_at=EXPORTED_AT,
    )
    assert '--    - Study the project goal: "Ship a CLI"' in sql
    assert "--    - Understand the context: no additional description" in sql
    assert "--    - Assess the current progress (2 steps)" in sql


def test_russian_prompt_uses_russian_placeholder():
    sql = format_export(
        _project(), exported_at=EXPORTED_AT, locale=ExportLocale.RU,
    )
    assert '--    - Изучи цель проекта: "Ship a CLI"' in sql
    assert "--    - Пойми контекст: без дополнительного описания" in sql
    assert "(0 шагов)" in sql


def test_prompt_includes_description_when_present():
    sql = format_export(
        _project(description="Backend focus"), exported_at=EXPORTED_AT,
    )
    assert "--    - Understand the context: Backend focus" in sql


def test_prompt_followed_by_two_blank_lines():
    sql = format_export(_project(), exported_at=EXPORTED_AT)
    assert "BELOW 🔽\n\n\n-- Project data\n" in sql


def test_everything_before_inserts_is_commented():
    sql = format_export(
        _project(title="Line one\nLine two", goal="g\nh", description="d\ne"),
        exported_at=EXPORTED_AT,
    )
    head = sql.split("INSERT INTO", 1)[0]
    for line in head.splitlines():
        assert line == "" or line.startswith("--"), line
    assert "-- Project: Line one\\nLine two" in head


def test_prompt_does_not_escape_quotes_in_comments():
    sql = format_export(_project(goal="Don't stop"), exported_at=EXPORTED_AT)
    assert '"Don\'t stop"' in sql
    assert "'Don''t stop'" in sql


def test_export_filename():
    assert export_filename(_project()) == f"project-{PROJECT_ID}.sql"
