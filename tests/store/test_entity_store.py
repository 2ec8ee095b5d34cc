"""
Tests for the in-memory entity store.
"""

import threading

import pytest

from blogql.store import (
    CommentRecord,
    EntityStore,
    PostRecord,
    UserRecord,
    generate_record_id,
    seed_store,
)
from blogql.store.seed_data import SEED_COMMENTS, SEED_POSTS, SEED_USERS


class TestCollections:
    """Tests for collection scan primitives."""

    def test_append_dispatches_on_record_type(self, empty_store):
        user = UserRecord(id="u1", name="Ada", email="ada@example.com")
        post = PostRecord(id="p1", title="T", body="B", published=True, author="u1")
        comment = CommentRecord(id="c1", text="hi", author="u1", post="p1")

        for record in (user, post, comment):
            assert empty_store.append(record) is record

        assert empty_store.users.all() == [user]
        assert empty_store.posts.all() == [post]
        assert empty_store.comments.all() == [comment]
        assert empty_store.counts() == {"users": 1, "posts": 1, "comments": 1}

    def test_get_by_id(self, store):
        assert store.users.get("1").name == "Steve"
        assert store.posts.get("12").published is False
        assert store.comments.get("105").post == "12"
        assert store.users.get("missing") is None

    def test_all_preserves_insertion_order(self, empty_store):
        for i in range(5):
            empty_store.append(UserRecord(id=str(i), name=f"n{i}", email=f"{i}@example.com"))

        assert [u.id for u in empty_store.users.all()] == ["0", "1", "2", "3", "4"]

    def test_all_returns_a_copy(self, store):
        users = store.users.all()
        users.clear()

        assert len(store.users) == 3

    def test_filter_and_exists(self, store):
        by_steve = store.posts.filter(lambda post: post.author == "1")

        assert [p.id for p in by_steve] == ["10", "11"]
        assert store.posts.filter(lambda post: post.author == "nobody") == []
        assert store.users.exists(lambda user: user.email == "elon.musk@tesla.com")
        assert not store.users.exists(lambda user: user.email == "nobody@example.com")

    def test_duplicate_id_rejected(self, store):
        with pytest.raises(ValueError, match="Duplicate user id '1'"):
            store.append(UserRecord(id="1", name="Clone", email="clone@example.com"))

        assert len(store.users) == 3

    def test_same_id_allowed_across_collections(self, empty_store):
        empty_store.append(UserRecord(id="x", name="X", email="x@example.com"))
        empty_store.append(PostRecord(id="x", title="T", body="", published=False, author="x"))

        assert empty_store.counts() == {"users": 1, "posts": 1, "comments": 0}

    def test_unknown_record_type_rejected(self, empty_store):
        with pytest.raises(TypeError, match="Unsupported record type"):
            empty_store.append(object())  # type: ignore[arg-type]

    def test_records_are_immutable(self, store):
        user = store.users.get("1")

        with pytest.raises(AttributeError):
            user.name = "Changed"  # type: ignore[misc]


class TestTransaction:
    """Tests for the store-wide transaction lock."""

    def test_transaction_is_reentrant(self, empty_store):
        with empty_store.transaction() as tx:
            assert tx is empty_store
            tx.append(UserRecord(id="u1", name="Ada", email="ada@example.com"))
            assert tx.users.get("u1") is not None

    def test_transaction_blocks_other_threads(self, empty_store):
        entered = threading.Event()
        release = threading.Event()
        observed: list[int] = []

        def hold_lock():
            with empty_store.transaction():
                entered.set()
                release.wait(timeout=5)
                empty_store.append(UserRecord(id="u1", name="Ada", email="ada@example.com"))

        def read():
            observed.append(len(empty_store.users))

        writer = threading.Thread(target=hold_lock)
        writer.start()
        entered.wait(timeout=5)

        reader = threading.Thread(target=read)
        reader.start()
        reader.join(timeout=0.2)
        # Reader is still waiting on the lock
        assert observed == []

        release.set()
        writer.join(timeout=5)
        reader.join(timeout=5)

        assert observed == [1]


class TestSeedData:
    """Tests for the sample data."""

    def test_seed_store_loads_everything(self, empty_store):
        seed_store(empty_store)

        assert empty_store.users.all() == SEED_USERS
        assert empty_store.posts.all() == SEED_POSTS
        assert empty_store.comments.all() == SEED_COMMENTS

    def test_seed_foreign_keys_resolve(self, store):
        for post in store.posts.all():
            assert store.users.get(post.author) is not None
        for comment in store.comments.all():
            assert store.users.get(comment.author) is not None
            assert store.posts.get(comment.post) is not None

    def test_seed_emails_unique(self, store):
        emails = [user.email for user in store.users.all()]
        assert len(emails) == len(set(emails))


def test_generate_record_id_is_unique_and_disjoint_from_seed_ids():
    ids = {generate_record_id() for _ in range(1000)}
    seed_ids = {r.id for r in [*SEED_USERS, *SEED_POSTS, *SEED_COMMENTS]}

    assert len(ids) == 1000
    assert not ids & seed_ids
    assert all(len(i) == 36 for i in ids)


def test_fresh_store_is_empty():
    assert EntityStore().counts() == {"users": 0, "posts": 0, "comments": 0}
