"""Database Metadata - declarative Base shared by models and the session manager.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Schema created from Base.metadata, no migration history

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
