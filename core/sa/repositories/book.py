from typing import Iterable, List, Mapping, Optional, Any
import logging
from sqlalchemy.orm import Session
from core.sa.models import Book, LibraryEntry

logger = logging.getLogger(__name__)

class BookRepository:
    """Repository for the shared book catalog."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, book_id: str) -> Optional[Book]:
        """Get a book by its ID.
        
        Args:
            book_id: The catalog identifier of the book
            
        Returns:
            The Book object if found, None otherwise
        """
        return self.session.get(Book, book_id)

    def list_books(self, available_only: bool = True) -> List[Book]:
        """List catalog books in the order they were added.
        
        Args:
            available_only: Only return books flagged as available (default: True)
            
        Returns:
            List of Book objects
        """
        query = self.session.query(Book)
        if available_only:
            query = query.filter(Book.availability.is_(True))
        return query.order_by(Book.created_at).all()

    def build_book(
        self,
        title: str,
        author: str,
        cover_image: str = '',
        description: Optional[str] = '',
        genre: Optional[str] = '',
        book_id: Optional[str] = None,
        availability: bool = True
    ) -> Book:
        """Add a new book to the session without committing.
        
        A supplied book_id is used verbatim, otherwise one is generated.
        """
        book = Book(
            title=title,
            author=author,
            cover_image=cover_image or '',
            description=description or '',
            genre=genre or '',
            availability=availability
        )
        if book_id is not None:
            book.id = book_id
        self.session.add(book)
        return book

    def create_book(self, title: str, author: str, **fields: Any) -> Book:
        """Create and commit a new catalog book.
        
        Args:
            title: The title of the book
            author: The author of the book
            fields: cover_image, description, genre, book_id and availability
            
        Returns:
            The created Book object
        """
        book = self.build_book(title, author, **fields)
        self.session.commit()
        logger.info("Created catalog book %s", book.id)
        return book

    def seed(self, sample_books: Iterable[Mapping[str, Any]]) -> List[Book]:
        """Replace the whole catalog with a sample set.
        
        Library entries reference catalog books, so they are removed as well.
        
        Args:
            sample_books: Mappings of Book fields
            
        Returns:
            The created Book objects
        """
        try:
            self.session.query(LibraryEntry).delete()
            self.session.query(Book).delete()
            books = [self.build_book(**data) for data in sample_books]
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("Seeded catalog with %d books", len(books))
        return books
