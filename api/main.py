# api/main.py
import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import auth, books, mybooks
from core.catalog import GoogleBooksClient
from core.config import Settings, configure_logging
from core.sa.database import Database
from core.security import PasswordHasher, SessionManager

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the API with its collaborators wired from explicit settings.
    
    Args:
        settings: Application settings, read from the environment when omitted
        database: An existing Database to use instead of one built from settings.database_url
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Initialize database on startup
        database.init_db()
        yield
        database.dispose()

    app = FastAPI(title="Bookshelf API", version="0.1.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.database = database
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.session_manager = SessionManager(
        settings.jwt_secret_or_raise(),
        lifetime=timedelta(days=settings.session_days),
        algorithm=settings.jwt_algorithm,
    )
    app.state.catalog_client = GoogleBooksClient(
        base_url=settings.google_books_url,
        timeout=settings.google_books_timeout,
        api_key=settings.google_books_api_key,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Uncaught error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Books Library API"}

    app.include_router(auth.router)
    app.include_router(books.router)
    app.include_router(mybooks.router)

    return app
