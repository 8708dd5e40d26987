# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .book import Book
from .user import User
from .library import LibraryEntry, ReadingStatus, MIN_RATING, MAX_RATING

__all__ = [
    'Base',
    'TimestampMixin',
    'Book',
    'User',
    'LibraryEntry',
    'ReadingStatus',
    'MIN_RATING',
    'MAX_RATING'
]
