"""
Book Service - Mood-filtered book lists and admin CRUD on `books`
"""
import logging
from typing import Optional, List, Iterable

from sqlalchemy import select, delete

from moodlift.core.exceptions import RequestValidationFailed, NotFoundError
from moodlift.core.store import RemoteStore
from moodlift.models.book import Book, DEFAULT_COVER_COLOR, DEFAULT_GENRE
from moodlift.schemas.book import BookRead, BookWrite

logger = logging.getLogger(__name__)

MOOD_OPTIONS = ("Excellent", "Good", "Moderate", "Needs Support")
DEFAULT_BOOK_LIMIT = 6


class BookService:
    """Reads and writes the `books` table"""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_books(self) -> List[BookRead]:
        """All books, newest first (admin listing)."""
        async with self.store.session() as db:
            result = await db.execute(select(Book).order_by(Book.created_at.desc(), Book.id))
            return [BookRead.model_validate(b) for b in result.scalars().all()]

    async def list_for_mood(
        self,
        mood: Optional[str] = None,
        show_all: bool = False,
        limit: int = DEFAULT_BOOK_LIMIT
    ) -> List[BookRead]:
        """
        Books ordered by rating, optionally restricted to one mood tag

        Args:
            mood: Mood result label matched against `mood_tags`
            show_all: Ignore the mood filter
            limit: Max results

        Returns:
            List of books, highest rated first
        """
        async with self.store.session() as db:
            result = await db.execute(
                select(Book).order_by(Book.rating.desc().nulls_last(), Book.created_at.desc())
            )
            books = result.scalars().all()

        # mood_tags is a JSON array; containment is checked here so every backend behaves the same
        if mood and not show_all:
            books = [b for b in books if mood in (b.mood_tags or [])]
        return [BookRead.model_validate(b) for b in books[:limit]]

    async def get_book(self, book_id: str) -> Optional[BookRead]:
        async with self.store.session() as db:
            book = await db.get(Book, book_id)
            return BookRead.model_validate(book) if book else None

    async def get_books(self, book_ids: Iterable[str]) -> List[BookRead]:
        ids = list(book_ids)
        if not ids:
            return []
        async with self.store.session() as db:
            result = await db.execute(select(Book).where(Book.id.in_(ids)))
            return [BookRead.model_validate(b) for b in result.scalars().all()]

    async def create_book(self, payload: BookWrite) -> BookRead:
        """
        Insert a book, filling colour and genre defaults

        Raises:
            RequestValidationFailed: title or author missing
        """
        if not payload.title or not payload.author:
            raise RequestValidationFailed("Title and author are required")

        values = payload.model_dump(exclude_unset=True, exclude={"id"})
        values["cover_color"] = payload.cover_color or DEFAULT_COVER_COLOR
        values["genre"] = payload.genre or DEFAULT_GENRE
        if values.get("mood_tags") is None:
            values["mood_tags"] = []
        if not isinstance(payload.rating, (int, float)):
            values.pop("rating", None)

        async with self.store.session() as db:
            book = Book(**values)
            db.add(book)
            await db.flush()
            book_id = book.id

        logger.info(f"Created book {book_id}", extra={"book_id": book_id})
        return await self._refetch(book_id)

    async def update_book(self, payload: BookWrite) -> BookRead:
        """
        Apply the supplied fields to an existing book

        Raises:
            RequestValidationFailed: id missing
            NotFoundError: no book with that id
        """
        if not payload.id:
            raise RequestValidationFailed("Book ID is required")

        values = payload.model_dump(exclude_unset=True, exclude={"id"})
        async with self.store.session() as db:
            book = await db.get(Book, payload.id)
            if book is None:
                raise NotFoundError("Book", payload.id)
            for field, value in values.items():
                setattr(book, field, value)

        return await self._refetch(payload.id)

    async def delete_book(self, book_id: Optional[str]) -> None:
        if not book_id:
            raise RequestValidationFailed("Book ID is required")
        async with self.store.session() as db:
            await db.execute(delete(Book).where(Book.id == book_id))

    async def _refetch(self, book_id: str) -> BookRead:
        book = await self.get_book(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)
        return book
