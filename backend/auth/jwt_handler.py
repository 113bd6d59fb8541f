import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config
from backend.models.user import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity carried by a verified access token."""

    user_id: int
    role: Role


def create_access_token(user_id: int, role: Role | str, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": Role(role).value,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def verify_access_token(token: str) -> TokenIdentity | None:
    """Return the identity in ``token``, or ``None`` if it cannot be trusted.

    Malformed tokens, bad signatures, expired tokens and tokens whose claims
    do not name a user id and a known role are all rejected the same way.
    """
    try:
        payload = decode_access_token(token)
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected invalid access token: %s", type(exc).__name__)
        return None

    try:
        return TokenIdentity(user_id=int(payload["sub"]), role=Role(payload.get("role")))
    except (KeyError, TypeError, ValueError):
        logger.info("Rejected access token with unusable claims")
        return None
