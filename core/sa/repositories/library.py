from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from core.exceptions import NotFoundError, ValidationError
from core.sa.models import LibraryEntry, ReadingStatus, MIN_RATING, MAX_RATING

NOT_IN_LIBRARY = "Book not found in your library"

class LibraryRepository:
    """Repository for managing a user's library entries.

    Every lookup is keyed by (user_id, book_id), so an entry owned by another
    user is reported exactly like a missing one.
    """

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _query(self):
        return self.session.query(LibraryEntry).options(joinedload(LibraryEntry.book))

    def list_entries(self, user_id: int) -> List[LibraryEntry]:
        """Get all entries owned by a user with their books loaded.
        
        Args:
            user_id: The ID of the owning user
            
        Returns:
            List of LibraryEntry objects in the order they were added
        """
        return (
            self._query()
            .filter(LibraryEntry.user_id == user_id)
            .order_by(LibraryEntry.id)
            .all()
        )

    def get_entry(self, user_id: int, book_id: str) -> Optional[LibraryEntry]:
        """Get the entry for a (user, book) pair.
        
        Returns:
            The LibraryEntry object if found, None otherwise
        """
        return (
            self._query()
            .filter(
                LibraryEntry.user_id == user_id,
                LibraryEntry.book_id == book_id
            )
            .one_or_none()
        )

    def get_entry_or_raise(self, user_id: int, book_id: str) -> LibraryEntry:
        entry = self.get_entry(user_id, book_id)
        if entry is None:
            raise NotFoundError(NOT_IN_LIBRARY)
        return entry

    def build_entry(self, user_id: int, book_id: str) -> LibraryEntry:
        """Add a new entry to the session without committing.
        
        The entry starts as "Want to Read" with no rating.
        """
        entry = LibraryEntry(
            user_id=user_id,
            book_id=book_id,
            status=ReadingStatus.WANT_TO_READ.value,
            rating=None
        )
        self.session.add(entry)
        return entry

    def update_status(self, user_id: int, book_id: str, status) -> LibraryEntry:
        """Set the reading status of an entry.
        
        Any status can follow any other.
        
        Raises:
            ValidationError: If status is not a ReadingStatus value
            NotFoundError: If the user has no entry for the book
        """
        try:
            status = ReadingStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in ReadingStatus)
            raise ValidationError(f"Invalid status. Must be one of: {allowed}")

        entry = self.get_entry_or_raise(user_id, book_id)
        entry.status = status.value
        self.session.commit()
        return entry

    def update_rating(self, user_id: int, book_id: str, rating: Optional[int]) -> LibraryEntry:
        """Set or clear the rating of an entry.
        
        Raises:
            ValidationError: If rating is neither None nor an integer from 1 to 5
            NotFoundError: If the user has no entry for the book
        """
        if rating is not None:
            if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
                raise ValidationError(f"Rating must be an integer from {MIN_RATING} to {MAX_RATING}")

        entry = self.get_entry_or_raise(user_id, book_id)
        entry.rating = rating
        self.session.commit()
        return entry

    def delete_entry(self, user_id: int, book_id: str) -> bool:
        """Delete the entry for a (user, book) pair.
        
        Returns:
            True if the entry was deleted, False if not found
        """
        result = (
            self.session.query(LibraryEntry)
            .filter(
                LibraryEntry.user_id == user_id,
                LibraryEntry.book_id == book_id
            )
            .delete()
        )
        self.session.commit()
        return result > 0
