"""Infrastructure Layer - database access, view cache, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All database failures mapped to DatabaseError before leaving this layer

Design Decisions:
    - Module-level singletons initialized by the FastAPI lifespan
"""
