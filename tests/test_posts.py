"""Tests for the in-memory post store: creation, likes and deletion rules."""

from models.post import LikeOutcome, DeleteOutcome


# --- create ---

def test_create_first_post(posts):
    post = posts.create("Hi", "World", "alice")
    assert post.id == 1
    assert post.username == "alice"
    assert post.likes == 0
    assert post.timestamp


def test_create_ids_strictly_increase(posts):
    ids = [posts.create(f"t{i}", "c", "alice").id for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_create_accepts_empty_fields(posts):
    post = posts.create("", "", "alice")
    assert posts.find_by_id(post.id).title == ""


def test_deleted_id_is_not_reused(posts):
    posts.create("a", "c", "alice")
    second = posts.create("b", "c", "alice")
    posts.delete(1, "alice")
    third = posts.create("c", "c", "alice")
    assert third.id > second.id


# --- listing ---

def test_list_by_username_keeps_insertion_order(posts):
    posts.create("first", "c", "alice")
    posts.create("other", "c", "bob")
    posts.create("second", "c", "alice")
    assert [p.title for p in posts.list_by_username("alice")] == ["first", "second"]


def test_recent_is_reverse_insertion_order(posts):
    for title in ("one", "two", "three"):
        posts.create(title, "c", "alice")
    assert [p.title for p in posts.recent()] == ["three", "two", "one"]


# --- like ---

def test_like_scenario(posts):
    posts.create("Hi", "World", "alice")

    result = posts.like(1, "bob")
    assert result.success
    assert result.likes == 1

    result = posts.like(1, "alice")
    assert not result.success
    assert result.outcome is LikeOutcome.SELF_LIKE
    assert posts.find_by_id(1).likes == 1


def test_like_is_not_idempotent(posts):
    posts.create("Hi", "World", "alice")
    counts = [posts.like(1, "bob").likes for _ in range(3)]
    assert counts == [1, 2, 3]


def test_like_missing_post(posts):
    result = posts.like(42, "bob")
    assert result.outcome is LikeOutcome.NOT_FOUND
    assert result.likes is None


# --- delete ---

def test_delete_by_non_owner_keeps_post(posts):
    posts.create("Hi", "World", "alice")
    result = posts.delete(1, "bob")
    assert result.outcome is DeleteOutcome.NOT_OWNER
    assert posts.find_by_id(1) is not None


def test_delete_by_owner_removes_post(posts):
    posts.create("Hi", "World", "alice")
    result = posts.delete(1, "alice")
    assert result.outcome is DeleteOutcome.DELETED
    assert posts.find_by_id(1) is None
    assert len(posts) == 0


def test_delete_missing_post(posts):
    assert posts.delete(7, "alice").outcome is DeleteOutcome.NOT_FOUND
