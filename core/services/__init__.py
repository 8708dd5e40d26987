from .library_service import LibraryService, BookDetails

__all__ = ['LibraryService', 'BookDetails']
