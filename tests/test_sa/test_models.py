# tests/test_sa/test_models.py
from sqlalchemy import inspect
from core.sa.models import Base, Person, Book

def test_tables_created(database):
    """Both entity tables exist after ensure_schema"""
    tables = inspect(database.engine).get_table_names()
    assert "person" in tables
    assert "book" in tables

def test_unique_constraints_declared():
    """Email and call number carry unique constraints"""
    person_uniques = {c.name for c in Person.__table__.constraints if c.__class__.__name__ == "UniqueConstraint"}
    book_uniques = {c.name for c in Book.__table__.constraints if c.__class__.__name__ == "UniqueConstraint"}
    assert "uix_person_email" in person_uniques
    assert "uix_book_call_number" in book_uniques

def test_book_person_id_has_no_foreign_key():
    """Books may reference people that do not exist"""
    assert not Book.__table__.c.person_id.foreign_keys

def test_timestamps_populated(db_session, sample_person):
    person = db_session.query(Person).first()
    assert person.created_at is not None
    assert person.updated_at is not None

def test_ensure_schema_is_idempotent(database):
    database.ensure_schema()
    database.ensure_schema()
    assert set(Base.metadata.tables) == {"person", "book"}
