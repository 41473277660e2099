"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Endpoints return JSON, errors included (see error_handlers.py); only
      the root greeting in main.py is plain text

Design Decisions:
    - Thin routes: parse path ids, delegate to services, pick the status code
"""
