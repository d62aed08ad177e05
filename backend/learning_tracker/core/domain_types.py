"""Domain Types — identity wrappers and enums shared across layers.

Invariants:
    - ProjectId, StepId wrap UUIDs; parse_project_id / parse_step_id are the only
      str → id conversions used by services
    - Steps without an explicit type are tagged DEFAULT_STEP_TYPE

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and query params without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", UUID)
StepId = NewType("StepId", UUID)


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_STEP_TYPE = "note"


# ─── Enums ───────────────────────────────────────────────────────

class ExportLocale(str, Enum):
    """Language of the instructional prompt embedded in an export."""
    EN = "en"
    RU = "ru"


def parse_record_id(raw: str) -> UUID | None:
    """Parse an opaque path id. Returns None when it is not a valid UUID."""
    try:
        return UUID(raw)
    except (ValueError, AttributeError, TypeError):
        return None


def parse_project_id(raw: str) -> ProjectId | None:
    parsed = parse_record_id(raw)
    return ProjectId(parsed) if parsed else None


def parse_step_id(raw: str) -> StepId | None:
    parsed = parse_record_id(raw)
    return StepId(parsed) if parsed else None
