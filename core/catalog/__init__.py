from .google_books import GoogleBooksClient, SearchResult

__all__ = ['GoogleBooksClient', 'SearchResult']
