# tests/test_sa/test_repositories/test_library_repository.py

import pytest
from core.exceptions import NotFoundError, ValidationError
from core.sa.repositories.library import LibraryRepository
from core.sa.models import Book, LibraryEntry, ReadingStatus

@pytest.fixture
def library_repo(db_session):
    """Fixture to create a LibraryRepository instance."""
    return LibraryRepository(db_session)

@pytest.fixture
def multiple_entries(db_session, sample_user):
    """Fixture to put several books in the sample user's library."""
    entries = []
    for i in range(1, 4):
        book = Book(id=f"book_{i}", title=f"Test Book {i}", author=f"Author {i}")
        db_session.add(book)
        entry = LibraryEntry(user_id=sample_user.id, book=book)
        db_session.add(entry)
        entries.append(entry)
        db_session.commit()
    return entries

def test_list_entries(library_repo, sample_user, multiple_entries):
    entries = library_repo.list_entries(sample_user.id)
    assert [entry.book_id for entry in entries] == ["book_1", "book_2", "book_3"]
    assert entries[0].book.title == "Test Book 1"

def test_list_entries_only_for_owner(library_repo, other_user, multiple_entries):
    assert library_repo.list_entries(other_user.id) == []

def test_get_entry(library_repo, sample_entry):
    entry = library_repo.get_entry(sample_entry.user_id, sample_entry.book_id)
    assert entry is not None
    assert entry.id == sample_entry.id

def test_get_entry_of_other_user(library_repo, sample_entry, other_user):
    assert library_repo.get_entry(other_user.id, sample_entry.book_id) is None

def test_build_entry_defaults(library_repo, db_session, sample_user, sample_book):
    entry = library_repo.build_entry(sample_user.id, sample_book.id)
    db_session.commit()
    assert entry.status == "Want to Read"
    assert entry.rating is None

@pytest.mark.parametrize("status", list(ReadingStatus))
def test_update_status(library_repo, sample_entry, status):
    entry = library_repo.update_status(sample_entry.user_id, sample_entry.book_id, status)
    assert entry.status == status.value

def test_update_status_any_order(library_repo, sample_entry):
    """There is no enforced progression between statuses."""
    user_id, book_id = sample_entry.user_id, sample_entry.book_id
    library_repo.update_status(user_id, book_id, ReadingStatus.READ)
    entry = library_repo.update_status(user_id, book_id, ReadingStatus.WANT_TO_READ)
    assert entry.status == "Want to Read"

def test_update_status_accepts_plain_value(library_repo, sample_entry):
    entry = library_repo.update_status(sample_entry.user_id, sample_entry.book_id, "Currently Reading")
    assert entry.status == "Currently Reading"

def test_update_status_invalid(library_repo, sample_entry):
    with pytest.raises(ValidationError):
        library_repo.update_status(sample_entry.user_id, sample_entry.book_id, "Abandoned")

def test_update_status_not_found(library_repo, sample_entry, other_user):
    with pytest.raises(NotFoundError, match="Book not found in your library"):
        library_repo.update_status(other_user.id, sample_entry.book_id, ReadingStatus.READ)

def test_update_rating(library_repo, sample_entry):
    entry = library_repo.update_rating(sample_entry.user_id, sample_entry.book_id, 4)
    assert entry.rating == 4

def test_clear_rating(library_repo, sample_entry):
    library_repo.update_rating(sample_entry.user_id, sample_entry.book_id, 5)
    entry = library_repo.update_rating(sample_entry.user_id, sample_entry.book_id, None)
    assert entry.rating is None

@pytest.mark.parametrize("rating", [0, 6, 3.5, "4", True])
def test_update_rating_invalid(library_repo, sample_entry, rating):
    with pytest.raises(ValidationError):
        library_repo.update_rating(sample_entry.user_id, sample_entry.book_id, rating)

def test_update_rating_not_found(library_repo, sample_user):
    with pytest.raises(NotFoundError):
        library_repo.update_rating(sample_user.id, "missing", 3)

def test_delete_entry(library_repo, sample_entry, db_session):
    user_id, book_id = sample_entry.user_id, sample_entry.book_id
    assert library_repo.delete_entry(user_id, book_id) is True
    assert library_repo.get_entry(user_id, book_id) is None
    # The catalog book is shared and stays
    assert db_session.get(Book, book_id) is not None

def test_delete_entry_of_other_user(library_repo, sample_entry, other_user):
    assert library_repo.delete_entry(other_user.id, sample_entry.book_id) is False
    assert library_repo.get_entry(sample_entry.user_id, sample_entry.book_id) is not None
