# api/dependencies.py
from typing import Iterator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.sa.database import Database
from core.sa.repositories import PersonRepository, BookRepository

def get_database(request: Request) -> Database:
    """The Database opened by the application lifespan"""
    return request.app.state.database

def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    """Get a database session.

    This is a FastAPI dependency that will be used to get a database session
    for each request. The session will be automatically closed when the request
    is complete.

    Yields:
        Session: A SQLAlchemy session
    """
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

def get_person_repository(db: Session = Depends(get_db)) -> PersonRepository:
    return PersonRepository(db)

def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    return BookRepository(db)

# Path ids outside 0..MAX_ID do not fit a 64-bit signed INTEGER column
MAX_ID = 2**63 - 1
