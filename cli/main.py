# cli/main.py
import logging
import click
from core.config import get_settings
from .commands.serve import serve
from .commands.db import init_db, seed

@click.group()
@click.option('--log-level', default=None, help='Logging level (defaults to LOG_LEVEL or INFO)')
def cli(log_level):
    """People & Books service CLI"""
    logging.basicConfig(
        level=(log_level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

cli.add_command(serve)
cli.add_command(init_db)
cli.add_command(seed)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
