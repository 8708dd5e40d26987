# core/sa/__init__.py
from .database import Database
from .models import Base, Book, User, LibraryEntry, ReadingStatus

__all__ = [
    'Database',
    'Base',
    'Book',
    'User',
    'LibraryEntry',
    'ReadingStatus'
]
