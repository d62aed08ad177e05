"""Learning Tracker Application Package — projects, progress steps and AI-ready exports.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
