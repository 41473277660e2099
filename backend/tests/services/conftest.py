"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behavior is not exercised here)
    - Seed fixtures write through test_db and commit, so routes see them
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from blogcart.db.base import Base
from blogcart.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
import blogcart.infrastructure.database as db_module
import blogcart.models  # noqa: F401
from blogcart.models.article import Article
from blogcart.models.product import Product
from blogcart.models.profile import Profile
from blogcart.models.tag import Tag
from blogcart.models.user import User
from blogcart.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def count_rows(test_session_factory):
    """Count rows of a model with a fresh session (no stale identity map)."""
    async def _count(model) -> int:
        async with test_session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return int(result.scalar_one())
    return _count


@pytest.fixture
async def seed_user(test_db):
    """A user with a profile."""
    user = User(email="ada@example.com")
    test_db.add(user)
    await test_db.flush()
    test_db.add(Profile(
        name="Ada", address="1 Analytical St", phone="555-0100", user_id=user.id,
    ))
    await test_db.commit()
    return user


@pytest.fixture
async def seed_articles(test_db, seed_user):
    """Three articles: two published (one authored), one anonymous draft."""
    articles = [
        Article(title="First", content="Hello", state="PUBLISHED", user_id=seed_user.id),
        Article(title="Second", content="World", state="DRAFT"),
        Article(title="Third", content="Again", state="PUBLISHED"),
    ]
    test_db.add_all(articles)
    await test_db.commit()
    return articles


@pytest.fixture
async def seed_tag(test_db):
    tag = Tag(name="books")
    test_db.add(tag)
    await test_db.commit()
    return tag


@pytest.fixture
async def seed_product(test_db):
    product = Product(name="Notebook", price=4.5)
    test_db.add(product)
    await test_db.commit()
    return product
