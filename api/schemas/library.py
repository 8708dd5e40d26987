# api/schemas/library.py
from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field

from core.sa.models import ReadingStatus, MIN_RATING, MAX_RATING
from .book import Book

class LibraryEntry(BaseModel):
    id: int
    user_id: int
    book_id: str
    status: ReadingStatus
    rating: Optional[int] = None
    book: Book
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class StatusUpdate(BaseModel):
    status: ReadingStatus

class RatingUpdate(BaseModel):
    # Required, null clears the rating
    rating: Optional[Annotated[int, Field(ge=MIN_RATING, le=MAX_RATING, strict=True)]]
