# core/sa/repositories/book.py
from core.sa.models import Book
from .base import BaseRepository

class BookRepository(BaseRepository[Book]):
    """Repository for managing Book entities."""

    model = Book

    def create(self, title: str = "", author: str = "", call_number: int = 0, person_id: int = 0) -> Book:
        """Create a new book.

        The owning person is not checked for existence.

        Raises:
            ConstraintViolation: If the call number is already taken
        """
        return self._create(Book(
            title=title,
            author=author,
            call_number=call_number,
            person_id=person_id
        ))

    def get_by_call_number(self, call_number: int):
        """Get a book by its call number"""
        return self.session.query(Book).filter(Book.call_number == call_number).first()
