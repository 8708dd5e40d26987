# api/routes/books.py

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from api.deps import get_catalog_client, get_current_user, get_db, get_settings
from api.schemas.book import Book, BookSearchResult, SeedResponse
from core.catalog import GoogleBooksClient
from core.config import Settings
from core.data.sample_books import SAMPLE_BOOKS
from core.exceptions import ExternalServiceError, ForbiddenError, ValidationError
from core.sa.models import User
from core.sa.repositories.book import BookRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=List[Book])
def get_books(db: Session = Depends(get_db)):
    """List the available books of the shared catalog."""
    repo = BookRepository(db)
    return [Book.model_validate(book) for book in repo.list_books(available_only=True)]

@router.get("/search", response_model=List[BookSearchResult])
def search_books(
    q: str = Query(..., description="Search terms"),
    limit: int = Query(20, ge=1, le=40, description="Maximum number of results"),
    client: GoogleBooksClient = Depends(get_catalog_client)
):
    """
    Search Google Books for books that may not be in the catalog yet.
    
    Results keep their Google volume id, which can be passed to
    POST /mybooks/{book_id} together with the result's fields.
    """
    try:
        results = client.search(q, limit=limit)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ExternalServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return [BookSearchResult(**result.to_dict()) for result in results]

def _ensure_seeding_enabled(settings: Settings) -> None:
    if not settings.enable_seed:
        raise ForbiddenError("Seeding is disabled")

@router.post("/seed", response_model=SeedResponse)
def seed_books(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Replace the catalog with the sample books.
    
    Requires a session and ENABLE_SEED. Every user's library is cleared along
    with the catalog.
    """
    try:
        _ensure_seeding_enabled(settings)
    except ForbiddenError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    books = BookRepository(db).seed(SAMPLE_BOOKS)
    logger.info("User %s reseeded the catalog", current_user.id)
    return SeedResponse(message="Books seeded successfully", count=len(books))
