# api/schemas/book.py
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

COVER_IMAGE_ALIASES = AliasChoices('cover_image', 'coverImage')

class BookBase(BaseModel):
    title: str
    author: str
    # Clients send and receive camelCase coverImage
    cover_image: str = Field('', validation_alias=COVER_IMAGE_ALIASES, serialization_alias='coverImage')
    description: Optional[str] = ''
    genre: Optional[str] = ''

class Book(BookBase):
    id: str
    availability: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class BookDetailsIn(BaseModel):
    """Catalog fields sent when adding a book that may not be in the catalog yet."""
    title: Optional[str] = None
    author: Optional[str] = None
    cover_image: str = Field('', validation_alias=COVER_IMAGE_ALIASES)
    description: Optional[str] = ''
    genre: Optional[str] = ''

class BookSearchResult(BookBase):
    id: str

class SeedResponse(BaseModel):
    message: str
    count: int
