# core/sa/repositories/__init__.py
from .base import BaseRepository
from .person import PersonRepository
from .book import BookRepository

__all__ = ['BaseRepository', 'PersonRepository', 'BookRepository']
