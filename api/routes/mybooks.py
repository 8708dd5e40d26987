# api/routes/mybooks.py

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from api.deps import get_current_user, get_db
from api.schemas.book import BookDetailsIn
from api.schemas.library import LibraryEntry, RatingUpdate, StatusUpdate
from api.schemas.user import MessageResponse
from core.exceptions import BookshelfError
from core.sa.models import User
from core.services.library_service import BookDetails, LibraryService

# Every route is scoped to the authenticated user, never to a user id from the request
router = APIRouter(prefix="/mybooks", tags=["mybooks"])

def _http_error(error: BookshelfError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)

@router.get("", response_model=List[LibraryEntry])
def get_my_books(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get the user's library, each entry with its catalog book embedded."""
    service = LibraryService(db)
    return [LibraryEntry.model_validate(entry) for entry in service.list_books(current_user.id)]

@router.post("/{book_id}", response_model=LibraryEntry, status_code=status.HTTP_201_CREATED)
def add_my_book(
    book_id: str,
    details: Optional[BookDetailsIn] = Body(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Add a book to the user's library.
    
    If the book is not in the catalog yet it is created under book_id from the
    supplied title, author, cover image, description and genre.
    """
    service = LibraryService(db)
    fallback = BookDetails(**details.model_dump()) if details is not None else None
    try:
        entry = service.add_book(current_user.id, book_id, fallback)
    except BookshelfError as e:
        raise _http_error(e)
    return LibraryEntry.model_validate(entry)

@router.patch("/{book_id}/status", response_model=LibraryEntry)
def update_my_book_status(
    book_id: str,
    update: StatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = LibraryService(db)
    try:
        entry = service.update_status(current_user.id, book_id, update.status)
    except BookshelfError as e:
        raise _http_error(e)
    return LibraryEntry.model_validate(entry)

@router.patch("/{book_id}/rating", response_model=LibraryEntry)
def update_my_book_rating(
    book_id: str,
    update: RatingUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = LibraryService(db)
    try:
        entry = service.update_rating(current_user.id, book_id, update.rating)
    except BookshelfError as e:
        raise _http_error(e)
    return LibraryEntry.model_validate(entry)

@router.delete("/{book_id}", response_model=MessageResponse)
def remove_my_book(
    book_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = LibraryService(db)
    try:
        service.remove_book(current_user.id, book_id)
    except BookshelfError as e:
        raise _http_error(e)
    return MessageResponse(message="Book removed from your library")
