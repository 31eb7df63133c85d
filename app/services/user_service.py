# app/services/user_service.py
"""
Operator accounts: CRUD, password change and login.
Passwords are hashed with app.utils.security and never compared in plain text.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import is_unique_violation
from app.exceptions import AuthenticationFailed, DuplicateUsername, NotFound, ValidationFailed
from app.models.user import User
from app.utils.logger import get_logger
from app.utils.security import hash_password, verify_password

logger = get_logger(__name__)

ROLES = ("USER", "ADMIN")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_role(role: Optional[str], errors: dict) -> str:
    role = (role or "USER").upper()
    if role not in ROLES:
        errors["role"] = f"Role must be one of {', '.join(ROLES)}"
    return role


def _username_taken(db: Session, username: str) -> bool:
    return db.query(User.id).filter(User.username == username).first() is not None


def _commit_username(db: Session, username: str) -> None:
    """Commit a user write. A lost race on the username surfaces as DuplicateUsername."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc, "uq_users_username", "users.username"):
            raise DuplicateUsername(username) from exc
        raise


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound(f"User not found with id: {user_id}")
    return user


def create_user(db: Session, username: Optional[str], password: Optional[str], role: Optional[str] = "USER") -> User:
    errors = {}
    if _blank(username):
        errors["username"] = "Username is required"
    if _blank(password):
        errors["password"] = "Password is required"
    role = _check_role(role, errors)
    if errors:
        raise ValidationFailed(errors)

    if _username_taken(db, username):
        raise DuplicateUsername(username)

    user = User(
        username=username,
        password_hash=hash_password(password),
        role=role,
        created_at=datetime.now(timezone.utc),
    )
    db.add(user)
    _commit_username(db, username)
    db.refresh(user)
    logger.info(f"[USER] created id={user.id} username={user.username} role={user.role}")
    return user


def update_user(db: Session, user_id: int, username: Optional[str], role: Optional[str] = "USER") -> User:
    """Change username and role. The password is changed only via change_password()."""
    errors = {}
    if _blank(username):
        errors["username"] = "Username is required"
    role = _check_role(role, errors)
    if errors:
        raise ValidationFailed(errors)

    user = get_user(db, user_id)
    if username != user.username and _username_taken(db, username):
        raise DuplicateUsername(username)

    user.username = username
    user.role = role
    _commit_username(db, username)
    db.refresh(user)
    logger.info(f"[USER] updated id={user.id} username={user.username} role={user.role}")
    return user


def change_password(db: Session, user_id: int, old_password: Optional[str], new_password: Optional[str]) -> None:
    if _blank(new_password):
        raise ValidationFailed({"new_password": "New password is required"})

    user = get_user(db, user_id)
    if not verify_password(old_password or "", user.password_hash):
        raise ValidationFailed({"old_password": "Old password is incorrect"})

    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info(f"[USER] password changed id={user_id}")


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info(f"[USER] deleted id={user_id}")


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the user if the credentials match. Same error for unknown user and wrong password."""
    user = db.query(User).filter(User.username == username).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning(f"[AUTH] failed login for username={username}")
        raise AuthenticationFailed()
    logger.info(f"[AUTH] login ok username={username}")
    return user
