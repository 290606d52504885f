"""Issue and verify the signed bearer tokens handed out at login."""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from storefront.config import settings
from storefront.errors import Unauthorized

logger = logging.getLogger(__name__)


def issue_token(user_id: int, issued_at: datetime | None = None) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.ACCESS_TOKEN_TTL_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> int:
    """Return the user id carried by ``token``.

    Raises ``Unauthorized`` when the signature is wrong, the token has
    expired, or the payload does not name a user.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token expired")
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected bearer token: %s", exc.__class__.__name__)
        raise Unauthorized("Invalid token")

    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthorized("Invalid token")
