"""Service Layer — validation and orchestration between routes and repositories.

Invariants:
    - Services raise TrackerError subclasses only
    - Services return typed records (core/records.py), never ORM rows
"""
