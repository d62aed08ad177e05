"""Step ORM — persists one progress entry under a Project.

Invariants:
    - Always belongs to a Project (project_id FK, ON DELETE CASCADE)
    - content is non-nullable text
    - ai_response is NULL until the user pastes an AI reply

Design Decisions:
    - type kept as free text (no enum): users tag steps however they like
    - project back-reference exists for the ORM cascade only; services read project_id
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from learning_tracker.db.base import Base


class Step(Base):
    """Step entity — a progress note with an optional AI response."""
    __tablename__ = "steps"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        "projectId",
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    ai_response: Mapped[str | None] = mapped_column(
        "aiResponse", Text, nullable=True,
    )
    type: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    project: Mapped["Project"] = relationship(
        "Project", back_populates="steps",
    )
