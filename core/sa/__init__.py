# core/sa/__init__.py
from .database import Database
from .errors import ConstraintViolation, DatabaseConnectionError
from .models import Base, Person, Book

__all__ = [
    'Database',
    'ConstraintViolation',
    'DatabaseConnectionError',
    'Base',
    'Person',
    'Book',
]
