"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Raw SQLAlchemy errors never leave this layer untranslated on handler paths
    - Infrastructure raises core/errors.py types, never HTTP exceptions
"""
