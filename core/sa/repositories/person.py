# core/sa/repositories/person.py
from typing import List
from core.sa.models import Person, Book
from .base import BaseRepository

class PersonRepository(BaseRepository[Person]):
    """Repository for managing Person entities."""

    model = Person

    def create(self, name: str = "", email: str = "") -> Person:
        """Create a new person.

        Args:
            name: Display name
            email: Email address, unique across people

        Returns:
            The created Person with its assigned ID

        Raises:
            ConstraintViolation: If the email is already taken
        """
        return self._create(Person(name=name, email=email))

    def find_related_books(self, person_id: int) -> List[Book]:
        """Get every book whose person_id matches.

        Works for IDs with no matching person too; the result is then
        whatever orphaned books point at that ID.
        """
        return self.session.query(Book).filter(Book.person_id == person_id).all()

    def get_by_email(self, email: str):
        """Get a person by email address"""
        return self.session.query(Person).filter(Person.email == email).first()
