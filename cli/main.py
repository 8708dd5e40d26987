# cli/main.py
import click
from core.config import Settings, configure_logging
from .commands.db import db
from .commands.serve import serve
from .commands.users import users

@click.group()
@click.option('--database-url', default=None, help='Database connection string (default: DATABASE_URL)')
@click.option('--log-level', default=None, help='Logging level (default: LOG_LEVEL or INFO)')
@click.pass_context
def cli(ctx, database_url, log_level):
    """Bookshelf CLI"""
    settings = Settings()
    if database_url:
        settings.database_url = database_url
    if log_level:
        settings.log_level = log_level
    configure_logging(settings.log_level)
    ctx.obj = settings

cli.add_command(db)
cli.add_command(serve)
cli.add_command(users)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
