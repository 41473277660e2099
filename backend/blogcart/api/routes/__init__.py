"""Route Modules — one file per resource group.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to services/)
"""
