import click
from core.config import Settings
from core.exceptions import ConflictError, ValidationError
from core.sa.database import Database
from core.sa.repositories.user import UserRepository
from core.security import PasswordHasher

@click.group()
def users():
    """User account commands"""
    pass

@users.command()
@click.argument('email')
@click.password_option(help='Password for the new account')
@click.pass_obj
def create(settings: Settings, email: str, password: str):
    """Register a user account"""
    database = Database(settings.database_url)
    database.init_db()
    session = database.get_session()
    try:
        repo = UserRepository(session, PasswordHasher(rounds=settings.bcrypt_rounds))
        user = repo.create_user(email, password)
        click.echo(click.style(f"Created user {user.email} (ID: {user.id})", fg='green'))
    except (ConflictError, ValidationError) as e:
        raise click.ClickException(e.message)
    finally:
        session.close()

@users.command(name='list')
@click.pass_obj
def list_users(settings: Settings):
    """List registered users"""
    database = Database(settings.database_url)
    database.init_db()
    session = database.get_session()
    try:
        accounts = UserRepository(session).list_users()
        if not accounts:
            click.echo("No users found")
            return
        for user in accounts:
            click.echo(f"{user.id}\t{user.email}\t{user.created_at:%Y-%m-%d}")
    finally:
        session.close()
