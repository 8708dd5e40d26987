# core/services/library_service.py

import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError, ValidationError
from core.sa.models import LibraryEntry
from core.sa.repositories.book import BookRepository
from core.sa.repositories.library import LibraryRepository, NOT_IN_LIBRARY

logger = logging.getLogger(__name__)

ALREADY_IN_LIBRARY = "Book already in your library"


@dataclass
class BookDetails:
    """Catalog fields supplied by the caller for a book that may not exist locally yet."""
    title: Optional[str] = None
    author: Optional[str] = None
    cover_image: str = ''
    description: Optional[str] = ''
    genre: Optional[str] = ''

    @property
    def is_complete(self) -> bool:
        return bool(self.title and self.author)


class LibraryService:
    """A user's personal library on top of the shared catalog."""

    def __init__(self, session: Session):
        self.session = session
        self.books = BookRepository(session)
        self.entries = LibraryRepository(session)

    def list_books(self, user_id: int) -> List[LibraryEntry]:
        return self.entries.list_entries(user_id)

    def add_book(self, user_id: int, book_id: str, details: Optional[BookDetails] = None) -> LibraryEntry:
        """Add a book to a user's library, creating the catalog book if needed.

        Books found through an external lookup are not in the catalog yet; they
        are created under the caller's book_id from the supplied details.

        Raises:
            ConflictError: If the book is already in the user's library
            ValidationError: If the book is unknown and no title/author were supplied
        """
        try:
            return self._add_book(user_id, book_id, details)
        except IntegrityError:
            self.session.rollback()
            if self.entries.get_entry(user_id, book_id) is not None:
                raise ConflictError(ALREADY_IN_LIBRARY)

        # The catalog book was created by a concurrent request, it exists now
        logger.info("Catalog book %s was created concurrently, retrying add", book_id)
        try:
            return self._add_book(user_id, book_id, details)
        except IntegrityError:
            self.session.rollback()
            raise ConflictError(ALREADY_IN_LIBRARY)

    def _add_book(self, user_id: int, book_id: str, details: Optional[BookDetails]) -> LibraryEntry:
        if self.entries.get_entry(user_id, book_id) is not None:
            raise ConflictError(ALREADY_IN_LIBRARY)

        book = self.books.get_by_id(book_id)
        if book is None:
            if details is None or not details.is_complete:
                raise ValidationError("Book is not in the catalog, title and author are required")
            book = self.books.build_book(
                title=details.title,
                author=details.author,
                cover_image=details.cover_image,
                description=details.description,
                genre=details.genre,
                book_id=book_id
            )
            logger.info("Adding book %s to the catalog for user %s", book_id, user_id)

        entry = self.entries.build_entry(user_id, book.id)
        entry.book = book
        self.session.commit()
        return entry

    def update_status(self, user_id: int, book_id: str, status) -> LibraryEntry:
        return self.entries.update_status(user_id, book_id, status)

    def update_rating(self, user_id: int, book_id: str, rating: Optional[int]) -> LibraryEntry:
        return self.entries.update_rating(user_id, book_id, rating)

    def remove_book(self, user_id: int, book_id: str) -> None:
        """Remove a book from the user's library.

        Raises:
            NotFoundError: If the user has no entry for the book
        """
        if not self.entries.delete_entry(user_id, book_id):
            raise NotFoundError(NOT_IN_LIBRARY)
