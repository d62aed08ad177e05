"""Project ORM — persists a learning goal and owns its progress steps.

Invariants:
    - id is UUID primary key (client-side default)
    - title and goal are non-nullable text
    - created_at never changes; updated_at is bumped on every ORM update
    - steps loaded eagerly and ordered by created_at ascending

Design Decisions:
    - Column names match the export schema (createdAt, updatedAt) so exported
      INSERT statements replay against this table; attributes stay snake_case
    - cascade delete-orphan + passive_deletes: no project delete endpoint exists,
      but removing a project out of band never leaves orphaned steps
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from learning_tracker.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Project(Base):
    """Project aggregate root — owns all Steps."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    steps: Mapped[list["Step"]] = relationship(
        "Step", back_populates="project",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by="Step.created_at", lazy="selectin",
    )
