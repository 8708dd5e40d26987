# core/sa/models/book.py
from uuid import uuid4
from sqlalchemy import String, Boolean, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

def generate_book_id() -> str:
    return uuid4().hex

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    # Generated locally, or supplied by the caller for books found through an
    # external catalog lookup so both identifiers stay aligned
    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=generate_book_id)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(500), nullable=False)
    cover_image: Mapped[str] = mapped_column(String(2048), nullable=False, default='')
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    genre: Mapped[str] = mapped_column(String(255), nullable=False, default='')
    availability: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    library_entries = relationship('LibraryEntry', back_populates='book')
    users = relationship('User', secondary='library_entry', viewonly=True)

    def __repr__(self):
        return f"<Book id={self.id!r} title={self.title!r}>"
