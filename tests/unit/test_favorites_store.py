"""
Unit tests for the favorites synchronization store
"""
import asyncio

import pytest

from moodlift.core.exceptions import RemoteStoreError
from moodlift.schemas.favorite import ItemType, MutationStatus
from moodlift.schemas.user import UserSession
from moodlift.services.favorites_store import FavoritesStore


class FakeRepository:
    """In-memory stand-in for the remote favorites table"""

    def __init__(self, rows=None):
        self.rows = set(rows or [])
        self.fail_reads = False
        self.fail_writes = False
        self.calls = []
        self.write_delay = 0

    async def list_favorites(self, user_id):
        self.calls.append(("list", user_id))
        if self.fail_reads:
            raise RemoteStoreError("connection refused")
        return [(t, i) for (u, t, i) in sorted(self.rows) if u == user_id]

    async def is_favorited(self, user_id, item_type, item_id):
        if self.fail_reads:
            raise RemoteStoreError("connection refused")
        return (user_id, item_type.value, item_id) in self.rows

    async def insert(self, user_id, item_type, item_id):
        self.calls.append(("insert", item_id))
        if self.write_delay:
            await asyncio.sleep(self.write_delay)
        if self.fail_writes:
            raise RemoteStoreError("insert rejected")
        self.rows.add((user_id, item_type.value, item_id))

    async def delete(self, user_id, item_type, item_id):
        self.calls.append(("delete", item_id))
        if self.write_delay:
            await asyncio.sleep(self.write_delay)
        if self.fail_writes:
            raise RemoteStoreError("delete rejected")
        self.rows.discard((user_id, item_type.value, item_id))


def user(user_id="u1"):
    return UserSession(user_id=user_id)


@pytest.mark.asyncio
async def test_set_user_loads_exact_remote_set():
    """Test loading a user replaces the local set with that user's rows only"""
    repo = FakeRepository([("u1", "game", "g1"), ("u1", "book", "b1"), ("u2", "game", "g9")])
    store = FavoritesStore(repo)

    await store.set_user(user("u1"))

    assert store.favorites == frozenset({"g1", "b1"})
    assert store.is_favorite("g1")
    assert not store.is_favorite("g9")


@pytest.mark.asyncio
async def test_toggle_twice_restores_original_state():
    """Test toggling an item on and off again"""
    repo = FakeRepository()
    store = FavoritesStore(repo)
    await store.set_user(user())

    assert await store.toggle("g1", ItemType.GAME) is True
    assert store.is_favorite("g1")
    assert ("u1", "game", "g1") in repo.rows

    assert await store.toggle("g1", ItemType.GAME) is False
    assert not store.is_favorite("g1")
    assert repo.rows == set()
    assert [c[0] for c in repo.calls] == ["list", "insert", "delete"]


@pytest.mark.asyncio
async def test_failed_insert_leaves_state_unchanged():
    """Test a rejected insert keeps the item out of the local set"""
    repo = FakeRepository()
    store = FavoritesStore(repo)
    await store.set_user(user())
    repo.fail_writes = True

    result = await store.toggle("b1", ItemType.BOOK)

    assert result is False
    assert store.favorites == frozenset()
    record = store.mutations["b1"]
    assert record.status == MutationStatus.FAILED
    assert record.action == "insert"
    assert record.error == "insert rejected"


@pytest.mark.asyncio
async def test_failed_delete_keeps_favorite():
    repo = FakeRepository([("u1", "book", "b1")])
    store = FavoritesStore(repo)
    await store.set_user(user())
    repo.fail_writes = True

    await store.remove("b1", ItemType.BOOK)

    assert store.is_favorite("b1")
    assert store.mutations["b1"].status == MutationStatus.FAILED


@pytest.mark.asyncio
async def test_confirmed_mutation_recorded():
    repo = FakeRepository()
    store = FavoritesStore(repo)
    await store.set_user(user())

    await store.toggle("g2", ItemType.GAME)

    record = store.mutations["g2"]
    assert record.status == MutationStatus.CONFIRMED
    assert record.item_type == ItemType.GAME
    assert record.error is None


@pytest.mark.asyncio
async def test_operations_without_session_are_noops():
    """Test anonymous callers never reach the remote table"""
    repo = FakeRepository([("u1", "game", "g1")])
    store = FavoritesStore(repo)

    await store.set_user(None)
    assert await store.toggle("g1", ItemType.GAME) is None
    await store.remove("g1", ItemType.GAME)
    await store.fetch_all()

    assert store.favorites == frozenset()
    assert repo.calls == []


@pytest.mark.asyncio
async def test_switching_user_clears_previous_state():
    """Test no favorites leak from one user to the next"""
    repo = FakeRepository([("u1", "game", "g1"), ("u2", "book", "b2")])
    store = FavoritesStore(repo)

    await store.set_user(user("u1"))
    await store.toggle("g5", ItemType.GAME)
    assert store.favorites == frozenset({"g1", "g5"})

    await store.set_user(user("u2"))
    assert store.favorites == frozenset({"b2"})
    assert store.mutations == {}

    await store.set_user(None)
    assert store.favorites == frozenset()


@pytest.mark.asyncio
async def test_same_user_does_not_refetch():
    repo = FakeRepository()
    store = FavoritesStore(repo)

    await store.set_user(user())
    await store.set_user(user())

    assert repo.calls == [("list", "u1")]


@pytest.mark.asyncio
async def test_fetch_failure_keeps_prior_state():
    repo = FakeRepository([("u1", "game", "g1")])
    store = FavoritesStore(repo)
    await store.set_user(user())
    repo.rows.add(("u1", "game", "g2"))
    repo.fail_reads = True

    await store.reconcile()

    assert store.favorites == frozenset({"g1"})


@pytest.mark.asyncio
async def test_reconcile_picks_up_remote_changes():
    repo = FakeRepository([("u1", "game", "g1")])
    store = FavoritesStore(repo)
    await store.set_user(user())
    repo.rows.add(("u1", "book", "b7"))

    await store.reconcile()

    assert store.favorites == frozenset({"g1", "b7"})


@pytest.mark.asyncio
async def test_remove_missing_item_is_harmless():
    repo = FakeRepository()
    store = FavoritesStore(repo)
    await store.set_user(user())

    await store.remove("nope", ItemType.BOOK)

    assert store.favorites == frozenset()
    assert store.mutations["nope"].status == MutationStatus.CONFIRMED


@pytest.mark.asyncio
async def test_concurrent_toggles_on_same_item_are_serialized():
    """Test two overlapping toggles end in the state of the second one"""
    repo = FakeRepository()
    repo.write_delay = 0.01
    store = FavoritesStore(repo)
    await store.set_user(user())

    await asyncio.gather(
        store.toggle("g1", ItemType.GAME),
        store.toggle("g1", ItemType.GAME),
    )

    assert [c[0] for c in repo.calls[1:]] == ["insert", "delete"]
    assert not store.is_favorite("g1")
    assert repo.rows == set()


@pytest.mark.asyncio
async def test_concurrent_toggles_from_separate_stores_are_serialized():
    """Test two requests, each with its own store, toggling the same item"""
    repo = FakeRepository()
    repo.write_delay = 0.01

    async def request():
        store = FavoritesStore(repo)
        await store.set_user(user())
        return await store.toggle("g1", ItemType.GAME)

    results = await asyncio.gather(request(), request())

    assert [c[0] for c in repo.calls if c[0] != "list"] == ["insert", "delete"]
    assert results == [True, False]
    assert repo.rows == set()


@pytest.mark.asyncio
async def test_toggle_uses_remote_state_over_stale_cache():
    """Test a toggle after another client added the item removes it"""
    repo = FakeRepository()
    store = FavoritesStore(repo)
    await store.set_user(user())
    repo.rows.add(("u1", "game", "g1"))

    assert await store.toggle("g1", ItemType.GAME) is False
    assert repo.rows == set()


@pytest.mark.asyncio
async def test_rejected_write_rereads_remote_table():
    repo = FakeRepository([("u1", "game", "g1")])
    store = FavoritesStore(repo)
    await store.set_user(user())
    repo.rows.add(("u1", "book", "b3"))
    repo.fail_writes = True

    await store.toggle("g2", ItemType.GAME)

    assert store.favorites == frozenset({"g1", "b3"})
    assert store.mutations["g2"].status == MutationStatus.FAILED
    assert [c[0] for c in repo.calls] == ["list", "insert", "list"]
