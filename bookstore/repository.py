"""Book persistence operations."""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.models import Book
from bookstore.schemas.book import BookUpdate

logger = logging.getLogger(__name__)

# Largest value a SQLite INTEGER column can hold.
MAX_BOOK_ID = 2**63 - 1


def parse_book_id(raw: str | int) -> int | None:
    """Return ``raw`` as a storable positive integer id, or None if it can't be one."""
    if isinstance(raw, int):
        value = raw
    elif raw.isascii() and raw.isdigit():
        value = int(raw)
    else:
        return None
    return value if 0 < value <= MAX_BOOK_ID else None


class BookRepository:
    """Reads and writes books through a single session.

    Lookups by id accept the raw path text; an id that isn't a positive
    integer matches nothing.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> Sequence[Book]:
        result = await self.session.execute(select(Book).order_by(Book.id))
        return result.scalars().all()

    async def find_by_id(self, book_id: str | int) -> Book | None:
        parsed = parse_book_id(book_id)
        if parsed is None:
            logger.debug("Malformed book id %r", book_id)
            return None
        result = await self.session.execute(select(Book).where(Book.id == parsed))
        book = result.scalar_one_or_none()
        if book is None:
            logger.debug("Book %d not found", parsed)
        return book

    async def create(self, title: str, author: str) -> Book:
        book = Book(title=title, author=author)
        self.session.add(book)
        await self.session.commit()
        await self.session.refresh(book)
        logger.info("Created book %d", book.id)
        return book

    async def update(self, book_id: str | int, patch: BookUpdate) -> Book | None:
        book = await self.find_by_id(book_id)
        if book is None:
            return None
        changes = {key: value for key, value in patch.model_dump().items() if value}
        if not changes:
            return book
        for key, value in changes.items():
            setattr(book, key, value)
        await self.session.commit()
        await self.session.refresh(book)
        logger.info("Updated book %d: %s", book.id, ", ".join(sorted(changes)))
        return book

    async def delete(self, book_id: str | int) -> bool:
        book = await self.find_by_id(book_id)
        if book is None:
            return False
        deleted_id = book.id
        await self.session.delete(book)
        await self.session.commit()
        logger.info("Deleted book %d", deleted_id)
        return True
