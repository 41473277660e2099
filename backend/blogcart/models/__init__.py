"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model declares __resource__, the human-readable name used in errors

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from blogcart.models.user import User  # noqa: F401
from blogcart.models.profile import Profile  # noqa: F401
from blogcart.models.article import Article  # noqa: F401
from blogcart.models.product import Product, product_tags  # noqa: F401
from blogcart.models.tag import Tag  # noqa: F401
from blogcart.models.cart_item import CartItem  # noqa: F401
