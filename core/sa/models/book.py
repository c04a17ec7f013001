# core/sa/models/book.py
from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String, nullable=False, default="")
    author: Mapped[str] = mapped_column(String, nullable=False, default="")
    call_number: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Plain column, no FOREIGN KEY: a book may point at a person that does not exist
    person_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    __table_args__ = (
        UniqueConstraint('call_number', name='uix_book_call_number'),
        {'sqlite_autoincrement': True},
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} call_number={self.call_number} person_id={self.person_id}>"
