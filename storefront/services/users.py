import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.deps import hash_password, verify_password
from storefront.errors import NotFound, Unauthorized, ValidationError
from storefront.models.user import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def get_by_username(db: Session, username: str) -> User | None:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def _commit_unique_username(db: Session, username: str) -> None:
    # the UNIQUE constraint is the source of truth; two concurrent inserts can both pass a pre-check
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError(f"Username '{username}' already exists")


def create_user(db: Session, username: str, password: str, is_admin: bool = False) -> User:
    if get_by_username(db, username):
        raise ValidationError(f"Username '{username}' already exists")

    user = User(
        username=username,
        password_hash=hash_password(password),
        is_admin=is_admin,
    )
    db.add(user)
    _commit_unique_username(db, username)
    db.refresh(user)
    logger.info("Created user id=%s username=%s admin=%s", user.id, user.username, user.is_admin)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    user = get_by_username(db, username)
    password_ok = verify_password(password, user.password_hash if user else None)
    if not user or not password_ok:
        logger.warning("Failed login for username=%s", username)
        raise Unauthorized(INVALID_CREDENTIALS)
    return user


def list_users(db: Session, limit: int | None = None, offset: int = 0) -> list[User]:
    stmt = select(User).order_by(User.id.asc()).offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user


def update_user(db: Session, user_id: int, changes: dict) -> User:
    user = get_user(db, user_id)

    username = changes.get("username")
    if "username" in changes and username is None:
        raise ValidationError("username cannot be null")
    if "password" in changes and changes["password"] is None:
        raise ValidationError("password cannot be null")

    if username and username != user.username:
        existing = get_by_username(db, username)
        if existing and existing.id != user.id:
            raise ValidationError(f"Username '{username}' already exists")
        user.username = username
    if changes.get("password"):
        user.password_hash = hash_password(changes["password"])

    _commit_unique_username(db, user.username)
    db.refresh(user)
    return user


def set_admin(db: Session, user_id: int, is_admin: bool, acting_user: User) -> User:
    user = get_user(db, user_id)
    if user.id == acting_user.id and not is_admin:
        raise ValidationError("Admins cannot revoke their own admin rights")
    user.is_admin = is_admin
    db.commit()
    db.refresh(user)
    logger.info("User id=%s admin flag set to %s by id=%s", user.id, is_admin, acting_user.id)
    return user


def delete_user(db: Session, user_id: int, acting_user: User) -> None:
    user = get_user(db, user_id)
    if user.id == acting_user.id:
        raise ValidationError("Admins cannot delete their own account")
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s by id=%s", user_id, acting_user.id)
