"""ORM Models — SQLAlchemy declarative models for projects and steps.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the aggregate root; every Step is scoped by project_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from learning_tracker.models.project import Project  # noqa: F401
from learning_tracker.models.step import Step  # noqa: F401
