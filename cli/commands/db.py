# cli/commands/db.py
import click
from core.sa.repositories import PersonRepository, BookRepository
from ..utils import open_database

SAMPLE_PERSON = {"name": "Jack", "email": "jack@email.com"}

SAMPLE_BOOKS = [
    {"title": "The Rules fo Thinking", "author": "Richard Templer", "call_number": 1234},
    {"title": "Book 2", "author": "Author 2", "call_number": 2345},
    {"title": "Book 3", "author": "Author 3", "call_number": 3456},
]

@click.command(name="init-db")
def init_db():
    """Create the person and book tables if missing"""
    with open_database() as database:
        database.ensure_schema()
    click.echo(click.style("Schema is up to date", fg='green'))

@click.command()
def seed():
    """Insert the sample person and their books, skipping rows that exist"""
    with open_database() as database:
        database.ensure_schema()
        with database.session_scope() as session:
            people = PersonRepository(session)
            books = BookRepository(session)

            person = people.get_by_email(SAMPLE_PERSON["email"])
            if person is None:
                person = people.create(**SAMPLE_PERSON)
                click.echo(click.style("Created person ", fg='green') + click.style(str(person.id), fg='cyan'))

            for sample in SAMPLE_BOOKS:
                if books.get_by_call_number(sample["call_number"]) is not None:
                    click.echo(click.style(f"Skipping existing book {sample['call_number']}", fg='yellow'))
                    continue
                book = books.create(person_id=person.id, **sample)
                click.echo(click.style("Created book ", fg='green') + click.style(str(book.id), fg='cyan'))
