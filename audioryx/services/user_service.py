# ============================================================================
# FILE: audioryx/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from audioryx.db.models.user import User
from audioryx.schemas.user import UserCreate
from audioryx.core.security import get_password_hash, verify_password
from audioryx.core.errors import DuplicateEmail, InvalidCredentials, PersistenceFailure
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Credential store: identity records, email uniqueness and password checks"""

    def __init__(self, bcrypt_rounds: int = 12):
        self.bcrypt_rounds = bcrypt_rounds
        # Checked against when the email is unknown so both failures cost one bcrypt run
        self._dummy_hash = get_password_hash("audioryx-no-such-user", bcrypt_rounds)

    def register_user(self, db: Session, user_data: UserCreate) -> User:
        """
        Create a new identity.

        The unique index on users.email is the uniqueness check: a duplicate
        INSERT fails inside the store and nothing is written.
        """
        user = User(
            email=user_data.email,
            password_hash=get_password_hash(user_data.password, self.bcrypt_rounds),
            display_name=user_data.display_name or user_data.email,
        )
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise PersistenceFailure() from e
        logger.info(f"User created: {user.id}")
        return user

    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        """Get user by id"""
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

    def authenticate_user(self, db: Session, email: str, password: str) -> User:
        """Verify credentials; unknown email and wrong password fail the same way"""
        user = self.get_user_by_email(db, email)
        if not user:
            verify_password(password, self._dummy_hash)
            logger.info("Login rejected")
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.info(f"Login rejected for user {user.id}")
            raise InvalidCredentials()
        return user

    def update_display_name(self, db: Session, user_id: int, display_name: str) -> Optional[User]:
        """Rename a user; the only mutable identity field"""
        user = self.get_user(db, user_id)
        if not user:
            return None
        try:
            user.display_name = display_name
            db.commit()
            db.refresh(user)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating user {user_id}: {e}")
            raise PersistenceFailure() from e
        logger.info(f"Display name updated for user {user_id}")
        return user
