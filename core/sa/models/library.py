# core/sa/models/library.py
from enum import Enum
from sqlalchemy import Integer, String, ForeignKey, Index, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class ReadingStatus(str, Enum):
    WANT_TO_READ = "Want to Read"
    CURRENTLY_READING = "Currently Reading"
    READ = "Read"

MIN_RATING = 1
MAX_RATING = 5

class LibraryEntry(Base, TimestampMixin):
    """A user's relationship to one catalog book."""
    __tablename__ = 'library_entry'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)
    book_id: Mapped[str] = mapped_column(String(255), ForeignKey('book.id'), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default=ReadingStatus.WANT_TO_READ.value)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    user = relationship('User', back_populates='library_entries')
    book = relationship('Book', back_populates='library_entries')

    __table_args__ = (
        UniqueConstraint('user_id', 'book_id', name='uix_library_entry_user_book'),
        CheckConstraint(
            f'rating IS NULL OR (rating >= {MIN_RATING} AND rating <= {MAX_RATING})',
            name='ck_library_entry_rating_range'
        ),
        Index('idx_library_entry_user_id', 'user_id'),
    )

    def __repr__(self):
        return f"<LibraryEntry user_id={self.user_id} book_id={self.book_id!r} status={self.status!r}>"
