# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from core.sa.database import Database
from core.sa.models import Book, User, LibraryEntry, ReadingStatus
from core.security import PasswordHasher

# Lowest cost bcrypt accepts, keeps the suite fast
TEST_BCRYPT_ROUNDS = 4

@pytest.fixture
def test_db_url(tmp_path):
    """SQLite database file unique to the test."""
    return f"sqlite:///{tmp_path / 'test_bookshelf.db'}"

@pytest.fixture
def database(test_db_url):
    """Create a test database instance with a fresh schema"""
    db = Database(test_db_url)
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def hasher():
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)

@pytest.fixture
def sample_user(db_session, hasher):
    """Create a sample user for testing."""
    user = User(email="reader@example.com", password_hash=hasher.hash("secret-pw"))
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def other_user(db_session, hasher):
    user = User(email="other@example.com", password_hash=hasher.hash("other-pw"))
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def sample_book(db_session):
    """Create a sample catalog book for testing."""
    book = Book(
        id="book_1",
        title="Test Book",
        author="Test Author",
        cover_image="http://example.com/cover.jpg",
        description="Test book description",
        genre="Fiction"
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_entry(db_session, sample_user, sample_book):
    """Put the sample book in the sample user's library."""
    entry = LibraryEntry(
        user_id=sample_user.id,
        book_id=sample_book.id,
        status=ReadingStatus.WANT_TO_READ.value
    )
    db_session.add(entry)
    db_session.commit()
    return entry
