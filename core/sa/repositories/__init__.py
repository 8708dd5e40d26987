from .book import BookRepository
from .user import UserRepository
from .library import LibraryRepository

__all__ = ['BookRepository', 'UserRepository', 'LibraryRepository']
