# cli/utils.py
import click
from core.sa.database import Database
from core.sa.errors import DatabaseConnectionError

def open_database() -> Database:
    """Build a Database from the environment and verify it answers.

    Exits the process when the backend is unreachable.
    """
    try:
        database = Database.from_settings()
    except DatabaseConnectionError as e:
        raise click.ClickException(str(e)) from e
    try:
        database.connect()
    except DatabaseConnectionError as e:
        database.close()
        raise click.ClickException(str(e)) from e
    return database
