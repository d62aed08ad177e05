"""Infrastructure Layer — database access, repositories and cross-cutting concerns.

Invariants:
    - Every SQLAlchemy failure is translated to PersistenceError before leaving this layer
"""
