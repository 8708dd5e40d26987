from .user import User, Credentials, AuthResponse, MessageResponse
from .book import Book, BookDetailsIn, BookSearchResult, SeedResponse
from .library import LibraryEntry, StatusUpdate, RatingUpdate

__all__ = [
    'User', 'Credentials', 'AuthResponse', 'MessageResponse',
    'Book', 'BookDetailsIn', 'BookSearchResult', 'SeedResponse',
    'LibraryEntry', 'StatusUpdate', 'RatingUpdate'
]
