"""Services Layer - invoice mutation pipeline, outcome reporting, and read queries.

Invariants:
    - Services receive their collaborators as arguments (no ambient framework hooks)
    - Each service call touches the database through exactly one scoped connection

Design Decisions:
    - One file per pipeline stage for locality
"""
