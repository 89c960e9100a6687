"""
Password hashing, registration and credential checks
"""
import logging
import os
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from forum.database import transaction
from forum.models import User
from forum.utils.errors import ErrorKind, ForumError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    """Hash a password with a fresh salt"""
    hashed = bcrypt.hashpw(_password_bytes(plain_password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash"""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password hash is malformed")
        return False


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def verify_credentials(db: Session, email: str, plain_password: str) -> Optional[User]:
    """
    Return the user when email and password match, None otherwise.
    A failed login is a normal outcome, not an error.
    """
    user = get_user_by_email(db, email)
    if not user or not verify_password(plain_password, user.hashed_password):
        logger.info(f"Login failed for {email}")
        return None
    logger.info(f"User {user.id} logged in")
    return user


def _create_user(db: Session, email: str, password: str, is_admin: bool) -> User:
    if get_user_by_email(db, email):
        raise ForumError(ErrorKind.ALREADY_EXISTS, "User already exist for the given e-mail.")

    user = User(email=email, hashed_password=hash_password(password), is_admin=is_admin)
    try:
        with transaction(db):
            db.add(user)
            db.flush()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        raise ForumError(ErrorKind.ALREADY_EXISTS, "User already exist for the given e-mail.")
    db.refresh(user)
    return user


def register_user(db: Session, email: str, password: str) -> User:
    """Create a regular (non-admin) member"""
    user = _create_user(db, email, password, is_admin=False)
    logger.info(f"Registered user {user.id}")
    return user


def create_admin(db: Session, email: str, password: str) -> User:
    """Create an administrator; no API flow grants the admin flag"""
    user = _create_user(db, email, password, is_admin=True)
    logger.info(f"Created admin user {user.id}")
    return user
