"""API Layer - FastAPI routes, error handlers, and the HTTP navigator.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes read forms and build collaborators; pipelines live in services/

Design Decisions:
    - Thin routes delegate to services
"""
