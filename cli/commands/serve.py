import os
import click
import uvicorn
from core.config import Settings

@click.command()
@click.option('--host', default=None, help='Interface to bind (default: HOST)')
@click.option('--port', default=None, type=int, help='Port to listen on (default: PORT)')
@click.option('--reload', is_flag=True, help='Reload on code changes')
@click.pass_obj
def serve(settings: Settings, host, port, reload):
    """Run the API server"""
    host = host or settings.host
    port = port or settings.port
    # The app factory reads its settings from the environment of the server process
    os.environ["DATABASE_URL"] = settings.database_url
    os.environ["LOG_LEVEL"] = settings.log_level
    click.echo(f"Serving Bookshelf API on {host}:{port}")
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower()
    )
