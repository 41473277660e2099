"""Database Metadata — SQLAlchemy declarative Base shared by every model.

Design Decisions:
    - Engine and sessions live in infrastructure/database.py; this package only
      owns table metadata (ADR: alembic imports it without creating an engine)
"""
