from fastapi import Depends, Request
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from storefront.db import get_db
from storefront.errors import Forbidden, Unauthorized
from storefront.models.user import User


password_context = CryptContext(
    schemes=["pbkdf2_sha256", "bcrypt"],
    default="pbkdf2_sha256",
    deprecated="auto",
)

# verified against when the username is unknown, so both login failures cost the same
_DUMMY_HASH = password_context.hash("storefront-dummy-password")


def verify_password(plain: str, hashed: str | None) -> bool:
    try:
        return password_context.verify(plain, hashed or _DUMMY_HASH)
    except (ValueError, TypeError):
        return False


def hash_password(password: str) -> str:
    return password_context.hash(password)


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """Load the caller identified by the bearer token.

    ``BearerAuthMiddleware`` has already decoded the token onto
    ``request.state``; this turns that identity into a ``User`` row.
    """
    auth_error = getattr(request.state, "auth_error", None)
    if auth_error is not None:
        raise auth_error

    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise Unauthorized()

    user = db.get(User, user_id)
    if not user:
        raise Unauthorized("Invalid token")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise Forbidden()
    return user
