from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from core.exceptions import ConflictError
from core.sa.models import User
from core.security import PasswordHasher

logger = logging.getLogger(__name__)

class UserRepository:
    """Repository for managing User entities and their credentials."""

    def __init__(self, session: Session, hasher: Optional[PasswordHasher] = None):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
            hasher: Password hasher used for new and existing credentials
        """
        self.session = session
        self.hasher = hasher or PasswordHasher()

    def create_user(self, email: str, password: str) -> User:
        """Register a new user.
        
        Args:
            email: The user's email, stored as given
            password: The plaintext password; only its salted hash is stored
            
        Returns:
            The created User object
            
        Raises:
            ConflictError: If a user with the given email already exists
            ValidationError: If the password cannot be hashed
        """
        # Check if user already exists
        if self.get_by_email(email) is not None:
            raise ConflictError("User already exists")

        user = User(email=email, password_hash=self.hasher.hash(password))
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("User already exists")
        logger.info("Registered user %s", user.id)
        return user

    def verify_password(self, user: User, password: str) -> bool:
        """Check a plaintext password against the user's stored hash."""
        return self.hasher.verify(password, user.password_hash)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by their ID.
        
        Args:
            user_id: The ID of the user to retrieve
            
        Returns:
            The User object if found, None otherwise
        """
        return self.session.query(User).filter(User.id == user_id).one_or_none()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).one_or_none()

    def list_users(self) -> List[User]:
        return self.session.query(User).order_by(User.id).all()

    def count_users(self) -> int:
        """Get the total number of users.
        
        Returns:
            Total number of users in the database
        """
        return self.session.query(User).count()
