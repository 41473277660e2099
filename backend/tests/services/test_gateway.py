"""EntityGateway — filters, includes, bulk counts and constraint mapping.

Invariants:
    - where accepts only indexed columns; sequences mean IN
    - include paths are bounded at two hops
    - update_many / delete_many count matched rows only
    - Gateway calls flush, never commit
"""

import pytest

from blogcart.core.errors import ConstraintViolationError, ResourceNotFoundError
from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.article import Article
from blogcart.models.user import User


async def test_find_many_orders_by_id(test_db, seed_articles):
    rows = await EntityGateway(test_db, Article).find_many()
    assert [a.title for a in rows] == ["First", "Second", "Third"]


async def test_where_equality_on_indexed_column(test_db, seed_articles):
    rows = await EntityGateway(test_db, Article).find_many({"state": "PUBLISHED"})
    assert [a.title for a in rows] == ["First", "Third"]


async def test_where_sequence_means_in(test_db, seed_articles):
    rows = await EntityGateway(test_db, Article).find_many({"id": [1, 3, 99]})
    assert [a.id for a in rows] == [1, 3]


async def test_where_rejects_non_indexed_column(test_db):
    with pytest.raises(ValueError, match="not indexed"):
        await EntityGateway(test_db, Article).find_many({"title": "First"})


async def test_where_rejects_unknown_column(test_db):
    with pytest.raises(ValueError, match="no column"):
        await EntityGateway(test_db, Article).count({"nope": 1})


async def test_skip_and_take(test_db, seed_articles):
    rows = await EntityGateway(test_db, Article).find_many(skip=1, take=1)
    assert [a.title for a in rows] == ["Second"]


async def test_include_loads_two_hops(test_db, seed_articles):
    rows = await EntityGateway(test_db, Article).find_many(
        {"id": 1}, include=("user.profile",),
    )
    assert rows[0].user.profile.name == "Ada"


async def test_include_deeper_than_two_hops_rejected(test_db):
    with pytest.raises(ValueError, match="exceeds depth"):
        await EntityGateway(test_db, Article).find_many(
            include=("user.articles.user",),
        )


async def test_include_unknown_relationship_rejected(test_db):
    with pytest.raises(ValueError, match="no relationship"):
        await EntityGateway(test_db, Article).find_many(include=("author",))


async def test_find_unique_returns_none_when_absent(test_db):
    assert await EntityGateway(test_db, User).find_unique(5) is None


async def test_find_unique_or_throw(test_db):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await EntityGateway(test_db, User).find_unique_or_throw(5)
    assert exc_info.value.message == "User not found"


async def test_count_with_filter(test_db, seed_articles):
    gateway = EntityGateway(test_db, Article)
    assert await gateway.count() == 3
    assert await gateway.count({"state": "DRAFT"}) == 1


async def test_create_one_maps_unique_violation(test_db, seed_user):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await EntityGateway(test_db, User).create_one(
            {"email": "ada@example.com"}, conflict_message="taken",
        )
    assert exc_info.value.message == "taken"
    await test_db.rollback()


async def test_create_many_returns_count(test_db):
    result = await EntityGateway(test_db, User).create_many([
        {"email": "a@example.com"}, {"email": "b@example.com"},
    ])
    assert result == {"count": 2}


async def test_update_many_counts_matched_rows(test_db, seed_articles):
    gateway = EntityGateway(test_db, Article)
    result = await gateway.update_many([1, 2, 99], {"state": "ARCHIVED"})
    assert result == {"count": 2}
    assert await gateway.count({"state": "ARCHIVED"}) == 2


async def test_update_many_without_fields_counts_matches(test_db, seed_articles):
    result = await EntityGateway(test_db, Article).update_many([2, 99], {})
    assert result == {"count": 1}


async def test_update_many_with_no_ids(test_db):
    assert await EntityGateway(test_db, Article).update_many([], {"state": "DRAFT"}) == {"count": 0}


async def test_update_one_missing_row(test_db):
    with pytest.raises(ResourceNotFoundError):
        await EntityGateway(test_db, Article).update_one(9, {"title": "x"})


async def test_delete_many_counts_matched_rows(test_db, seed_articles):
    gateway = EntityGateway(test_db, Article)
    assert await gateway.delete_many([2, 3, 42]) == {"count": 2}
    assert await gateway.count() == 1


async def test_delete_one_returns_record(test_db, seed_articles):
    record = await EntityGateway(test_db, Article).delete_one(2)
    assert record.title == "Second"


async def test_gateway_does_not_commit(test_db):
    """A flushed write disappears on rollback: nothing was committed."""
    users = EntityGateway(test_db, User)
    await users.create_one({"email": "pending@example.com"})
    assert await users.count() == 1
    await test_db.rollback()
    assert await users.count() == 0


async def test_bulk_update_is_not_committed(test_db, seed_articles):
    articles = EntityGateway(test_db, Article)
    await articles.update_many([1, 2], {"state": "ARCHIVED"})
    await test_db.rollback()
    assert await articles.count({"state": "ARCHIVED"}) == 0
