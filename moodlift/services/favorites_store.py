"""
Favorites synchronization store.

Holds the set of item ids the current user has favorited and mirrors every
change to the remote `user_favorites` table. The local set is a cache of the
remote rows for one user: it is rebuilt in full whenever the user changes and
only mutated after the matching remote call succeeds. Remote failures are
logged and swallowed; a rejected write is followed by a full re-read.

One store is built per request and injected into handlers, so the per-item
locks live at module level.
"""

import asyncio
import logging
import weakref
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, FrozenSet, List, Optional, Tuple

from sqlalchemy import delete, select

from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore
from moodlift.models.favorite import UserFavorite
from moodlift.schemas.favorite import ItemType, MutationStatus
from moodlift.schemas.user import UserSession

logger = logging.getLogger(__name__)

# (user_id, item_id) -> lock, shared by every store in the process
_item_locks: "weakref.WeakValueDictionary[Tuple[str, str], asyncio.Lock]" = weakref.WeakValueDictionary()


def _lock_for(user_id: str, item_id: str) -> asyncio.Lock:
    key = (user_id, item_id)
    lock = _item_locks.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _item_locks[key] = lock
    return lock


class FavoritesRepository:
    """Equality-filtered reads and writes on `user_favorites`."""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_favorites(self, user_id: str) -> List[Tuple[str, str]]:
        """Return (item_type, item_id) pairs favorited by a user."""
        async with self.store.session() as db:
            result = await db.execute(
                select(UserFavorite.item_type, UserFavorite.item_id)
                .where(UserFavorite.user_id == user_id)
                .order_by(UserFavorite.created_at, UserFavorite.id)
            )
            return [(row.item_type, row.item_id) for row in result]

    async def is_favorited(self, user_id: str, item_type: ItemType, item_id: str) -> bool:
        async with self.store.session() as db:
            result = await db.execute(
                select(UserFavorite.id).where(
                    UserFavorite.user_id == user_id,
                    UserFavorite.item_type == item_type.value,
                    UserFavorite.item_id == item_id,
                )
            )
            return result.first() is not None

    async def insert(self, user_id: str, item_type: ItemType, item_id: str) -> None:
        async with self.store.session() as db:
            db.add(UserFavorite(user_id=user_id, item_type=item_type.value, item_id=item_id))

    async def delete(self, user_id: str, item_type: ItemType, item_id: str) -> None:
        async with self.store.session() as db:
            await db.execute(
                delete(UserFavorite).where(
                    UserFavorite.user_id == user_id,
                    UserFavorite.item_type == item_type.value,
                    UserFavorite.item_id == item_id,
                )
            )


@dataclass
class MutationRecord:
    """Latest remote mutation issued for one item."""
    item_id: str
    item_type: ItemType
    action: str  # "insert" or "delete"
    status: MutationStatus = MutationStatus.PENDING
    error: Optional[str] = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FavoritesStore:
    """
    Per-session cache of favorited item ids mirrored to the remote table.

    Every public operation is a no-op without a user session. Writes on the
    same (user, item) pair hold a process-wide lock, and a toggle decides from
    the remote row read under that lock, so overlapping requests with separate
    stores still end in the state of the last one.
    """

    def __init__(self, repository: FavoritesRepository, session: Optional[UserSession] = None):
        self.repository = repository
        self._session = session
        self._favorites: set[str] = set()
        self._mutations: Dict[str, MutationRecord] = {}

    @property
    def favorites(self) -> FrozenSet[str]:
        return frozenset(self._favorites)

    @property
    def mutations(self) -> Dict[str, MutationRecord]:
        return dict(self._mutations)

    def is_favorite(self, item_id: str) -> bool:
        return item_id in self._favorites

    async def set_user(self, session: Optional[UserSession]) -> None:
        """Switch to another user: drop the previous user's state, then load the new one."""
        previous = self._session.user_id if self._session else None
        new = session.user_id if session else None
        self._session = session
        if previous == new:
            return

        self._favorites = set()
        self._mutations = {}
        if session is not None:
            await self.fetch_all()

    async def fetch_all(self) -> None:
        """Replace the local set with the user's remote favorites; keep prior state on error."""
        if self._session is None:
            return
        user_id = self._session.user_id
        try:
            rows = await self.repository.list_favorites(user_id)
        except MoodLiftException as e:
            logger.error(
                f"Error fetching favorites: {e.message}",
                extra={"user_id": user_id, "error_code": e.error_code.value},
            )
            return

        # the user may have changed while the query was in flight
        if self._session is None or self._session.user_id != user_id:
            return
        self._favorites = {item_id for _item_type, item_id in rows}

    async def reconcile(self) -> None:
        """Re-read the remote table; called after a rejected write."""
        await self.fetch_all()

    async def toggle(self, item_id: str, item_type: ItemType) -> Optional[bool]:
        """
        Flip the favorite state of an item.

        Returns:
            The resulting favorite state, or None without a user session.
        """
        if self._session is None:
            return None

        async with _lock_for(self._session.user_id, item_id):
            await self._refresh_item(item_id, item_type)
            if item_id in self._favorites:
                await self._apply(item_id, item_type, "delete")
            else:
                await self._apply(item_id, item_type, "insert")
        return item_id in self._favorites

    async def remove(self, item_id: str, item_type: ItemType) -> None:
        """Delete an item remotely and locally; harmless when it is not a favorite."""
        if self._session is None:
            return

        async with _lock_for(self._session.user_id, item_id):
            await self._apply(item_id, item_type, "delete")

    async def _refresh_item(self, item_id: str, item_type: ItemType) -> None:
        """Bring one item's local state in line with its remote row; keep it on error."""
        user_id = self._session.user_id
        try:
            present = await self.repository.is_favorited(user_id, item_type, item_id)
        except MoodLiftException as e:
            logger.warning(
                f"Error reading favorite state: {e.message}",
                extra={"user_id": user_id, "item_id": item_id},
            )
            return

        if present:
            self._favorites.add(item_id)
        else:
            self._favorites.discard(item_id)

    async def _apply(self, item_id: str, item_type: ItemType, action: str) -> None:
        user_id = self._session.user_id
        record = MutationRecord(item_id=item_id, item_type=item_type, action=action)
        self._mutations[item_id] = record

        try:
            if action == "insert":
                await self.repository.insert(user_id, item_type, item_id)
            else:
                await self.repository.delete(user_id, item_type, item_id)
        except MoodLiftException as e:
            record.status = MutationStatus.FAILED
            record.error = e.message
            record.updated_at = datetime.now(timezone.utc)
            logger.error(
                f"Error {'adding' if action == 'insert' else 'removing'} favorite: {e.message}",
                extra={"user_id": user_id, "item_id": item_id, "item_type": item_type.value},
            )
            await self.reconcile()
            return

        if action == "insert":
            self._favorites.add(item_id)
        else:
            self._favorites.discard(item_id)
        record.status = MutationStatus.CONFIRMED
        record.updated_at = datetime.now(timezone.utc)
