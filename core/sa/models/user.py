# core/sa/models/user.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class User(Base, TimestampMixin):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stored verbatim, comparisons are case-sensitive
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    library_entries = relationship('LibraryEntry', back_populates='user', cascade='all, delete-orphan')
    books = relationship('Book', secondary='library_entry', viewonly=True)

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"
