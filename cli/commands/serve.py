# cli/commands/serve.py
import click
import uvicorn
from core.config import get_settings
from ..utils import open_database

@click.command()
@click.option('--host', default="0.0.0.0", help='Interface to bind')
@click.option('--port', default=None, type=int, help='Port to listen on (defaults to PORT or 8080)')
def serve(host: str, port: int):
    """Run the HTTP API"""
    # Fail fast before uvicorn starts when the database is unreachable
    open_database().close()

    port = port or get_settings().port
    click.echo(click.style("Serving on ", fg='blue') + click.style(f"{host}:{port}", fg='cyan'))
    uvicorn.run("api.main:app", host=host, port=port)
