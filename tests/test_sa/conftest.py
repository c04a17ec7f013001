# tests/test_sa/conftest.py
import os
import pytest
from sqlalchemy.orm import Session
from sqlalchemy.sql import text

from core.sa.database import Database
from core.sa.models import Base, Person, Book

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_library.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    db.ensure_schema()

    yield db

    db.close()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text("DELETE FROM person"))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def sample_person(db_session):
    """Create a sample person for testing."""
    person = Person(name="Jack", email="jack@email.com")
    db_session.add(person)
    db_session.commit()
    return person

@pytest.fixture
def person_with_books(db_session, sample_person):
    """Give the sample person three books."""
    for i, call_number in enumerate([1234, 2345, 3456], start=1):
        db_session.add(Book(
            title=f"Book {i}",
            author=f"Author {i}",
            call_number=call_number,
            person_id=sample_person.id
        ))
    db_session.commit()
    return sample_person
