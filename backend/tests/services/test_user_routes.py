"""User routes — user+profile transaction, duplicates, cascades, nested articles.

Invariants:
    - Duplicate email -> 400, no new User and no new Profile
    - The unique constraint catches duplicates the pre-check misses
    - Deleting a user removes profile and cart items and keeps articles anonymous
    - POST /user/{id}/articles surfaces the raw database message on a 500
"""

from sqlalchemy.exc import OperationalError

from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.article import Article
from blogcart.models.cart_item import CartItem
from blogcart.models.profile import Profile
from blogcart.models.user import User

NEW_USER = {
    "email": "grace@example.com",
    "name": "Grace",
    "address": "2 Compiler Rd",
    "phone": "555-0199",
}


# ─── POST /user ─────────────────────────────────────────────────


async def test_create_user_with_profile(client, count_rows):
    response = await client.post("/user", json=NEW_USER)
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "grace@example.com"
    assert body["profile"]["name"] == "Grace"
    assert body["profile"]["userId"] == body["user"]["id"]
    assert await count_rows(User) == 1
    assert await count_rows(Profile) == 1


async def test_duplicate_email_creates_nothing(client, seed_user, count_rows):
    response = await client.post("/user", json={**NEW_USER, "email": "ada@example.com"})
    assert response.status_code == 400
    assert response.json()["error"] == "User with this email already exists"
    assert await count_rows(User) == 1
    assert await count_rows(Profile) == 1


async def test_unique_constraint_backs_up_precheck(
    client, seed_user, count_rows, monkeypatch,
):
    """A request that slips past the pre-check still gets the same 400."""
    async def _no_match(self, where, include=()):
        return None

    monkeypatch.setattr(EntityGateway, "find_first", _no_match)
    response = await client.post("/user", json={**NEW_USER, "email": "ada@example.com"})
    assert response.status_code == 400
    assert response.json()["error"] == "User with this email already exists"
    assert await count_rows(User) == 1
    assert await count_rows(Profile) == 1


async def test_create_user_missing_profile_fields_is_400(client, count_rows):
    response = await client.post("/user", json={"email": "x@example.com"})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert await count_rows(User) == 0


# ─── /users ─────────────────────────────────────────────────────


async def test_create_users_batch(client, count_rows):
    response = await client.post("/users", json=[
        {"email": "a@example.com"}, {"email": "b@example.com"},
    ])
    assert response.status_code == 201
    assert response.json() == {"count": 2}
    assert await count_rows(User) == 2


async def test_create_users_batch_with_duplicate_persists_nothing(client, count_rows):
    response = await client.post("/users", json=[
        {"email": "a@example.com"}, {"email": "a@example.com"},
    ])
    assert response.status_code == 400
    assert await count_rows(User) == 0


async def test_list_users(client, seed_user):
    response = await client.get("/users")
    assert response.json() == [{"id": 1, "email": "ada@example.com"}]


# ─── /user/{id} ─────────────────────────────────────────────────


async def test_get_user_includes_profile(client, seed_user):
    response = await client.get("/user/1")
    assert response.status_code == 200
    assert response.json()["profile"]["phone"] == "555-0100"


async def test_get_missing_user_is_404(client):
    response = await client.get("/user/99")
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


async def test_get_user_with_bad_id_is_400(client):
    response = await client.get("/user/abc")
    assert response.status_code == 400


async def test_delete_user_cascades(client, seed_articles, seed_product, count_rows):
    await client.post("/users/1/cart", json={"productId": 1, "quantity": 2})
    assert await count_rows(CartItem) == 1

    response = await client.delete("/user/1")
    assert response.status_code == 200
    assert response.json()["email"] == "ada@example.com"
    assert await count_rows(User) == 0
    assert await count_rows(Profile) == 0
    assert await count_rows(CartItem) == 0
    assert await count_rows(Article) == 3

    orphaned = await client.get("/article/1")
    assert orphaned.json()["userId"] is None


async def test_delete_missing_user_is_404(client):
    response = await client.delete("/user/99")
    assert response.status_code == 404


# ─── Profiles ───────────────────────────────────────────────────


async def test_second_profile_is_rejected(client, seed_user, count_rows):
    response = await client.post("/user/1/profile", json={
        "name": "Other", "address": "x", "phone": "y",
    })
    assert response.status_code == 400
    assert response.json()["error"] == "Profile for this user already exists"
    assert await count_rows(Profile) == 1


async def test_profile_for_missing_user_is_404(client, count_rows):
    response = await client.post("/user/99/profile", json={
        "name": "Nobody", "address": "x", "phone": "y",
    })
    assert response.status_code == 404
    assert await count_rows(Profile) == 0


async def test_profile_for_bare_user(client):
    await client.post("/users", json={"email": "bare@example.com"})
    response = await client.post("/user/1/profile", json={
        "name": "Bare", "address": "x", "phone": "y",
    })
    assert response.status_code == 201
    listed = await client.get("/user/1/profiles")
    assert [p["name"] for p in listed.json()] == ["Bare"]


# ─── User-scoped articles ───────────────────────────────────────


async def test_list_user_articles(client, seed_articles):
    response = await client.get("/user/1/articles")
    assert [a["title"] for a in response.json()] == ["First"]


async def test_list_articles_for_missing_user_is_404(client):
    response = await client.get("/user/99/articles")
    assert response.status_code == 404


async def test_create_user_articles_sets_author(client, seed_user):
    response = await client.post("/user/1/articles", json=[
        {"title": "Mine", "content": "a"},
        {"title": "Also mine", "content": "b", "userId": 7},
    ])
    assert response.status_code == 201
    assert response.json() == {"count": 2}
    listed = await client.get("/user/1/articles")
    assert [a["title"] for a in listed.json()] == ["Mine", "Also mine"]


async def test_create_user_articles_validates(client, seed_user, count_rows):
    response = await client.post("/user/1/articles", json={
        "title": "t", "content": "c", "state": "BOGUS",
    })
    assert response.status_code == 400
    assert await count_rows(Article) == 0


async def test_create_articles_for_missing_user_is_404(client, count_rows):
    response = await client.post("/user/99/articles", json={"title": "t", "content": "c"})
    assert response.status_code == 404
    assert await count_rows(Article) == 0


async def test_create_user_articles_fault_exposes_raw_message(
    client, seed_user, monkeypatch,
):
    async def _db_down(self, items, conflict_message=None):
        raise OperationalError("INSERT", {}, Exception("connection lost"))

    monkeypatch.setattr(EntityGateway, "create_many", _db_down)
    response = await client.post("/user/1/articles", json={"title": "t", "content": "c"})
    assert response.status_code == 500
    assert response.json()["error"] == "connection lost"
