# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .person import Person
from .book import Book

__all__ = [
    'Base',
    'TimestampMixin',
    'Person',
    'Book',
]
