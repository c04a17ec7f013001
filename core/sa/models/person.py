# core/sa/models/person.py
from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

class Person(Base, TimestampMixin):
    __tablename__ = 'person'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False, default="")
    email: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    # Books are not mapped here; they are loaded on demand through
    # PersonRepository.find_related_books.

    __table_args__ = (
        UniqueConstraint('email', name='uix_person_email'),
        {'sqlite_autoincrement': True},
    )

    def __repr__(self) -> str:
        return f"<Person id={self.id} email={self.email!r}>"
