import click
from core.config import Settings
from core.data.sample_books import SAMPLE_BOOKS
from core.sa.database import Database
from core.sa.repositories.book import BookRepository

@click.group()
def db():
    """Database commands"""
    pass

@db.command()
@click.pass_obj
def init(settings: Settings):
    """Create the database schema"""
    Database(settings.database_url).init_db()
    click.echo(click.style("Database initialized", fg='green'))

@db.command()
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_obj
def seed(settings: Settings, yes: bool):
    """Replace the catalog with the sample books

    This deletes every catalog book and every library entry.
    """
    if not yes:
        click.confirm("This deletes all books and library entries. Continue?", abort=True)

    database = Database(settings.database_url)
    database.init_db()
    session = database.get_session()
    try:
        books = BookRepository(session).seed(SAMPLE_BOOKS)
        click.echo(click.style(f"Seeded {len(books)} books", fg='green'))
        for book in books:
            click.echo(f"  {book.title} by {book.author}")
    finally:
        session.close()
