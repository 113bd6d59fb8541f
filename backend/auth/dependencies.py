import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import APIKeyHeader

from backend.auth import jwt_handler
from backend.auth.jwt_handler import TokenIdentity
from backend.models.user import Role

logger = logging.getLogger(__name__)

security = APIKeyHeader(name="Authorization", auto_error=False)


def extract_token(authorization: str | None) -> str:
    """Return the text after the scheme prefix, whatever the scheme is."""
    parts = (authorization or "").split()
    return parts[1] if len(parts) > 1 else ""


def get_current_identity(
    request: Request,
    authorization: str | None = Depends(security),
) -> TokenIdentity:
    """Authenticate the request from the token in its Authorization header.

    A missing token is a 401. A token that fails verification for any reason
    (bad signature, expired, malformed) is a 403.
    """
    token = extract_token(authorization)
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    identity = jwt_handler.verify_access_token(token)
    if identity is None:
        raise HTTPException(status_code=403, detail="Invalid or expired token")

    request.state.identity = identity
    return identity


def require_role(role: Role):
    """Build a dependency that admits only identities holding exactly ``role``."""

    def check_role(identity: TokenIdentity | None = Depends(get_current_identity)) -> TokenIdentity:
        if identity is None or identity.role != role:
            logger.info("Role check failed: required %s", role.value)
            raise HTTPException(status_code=403, detail="Forbidden")
        return identity

    return check_role


require_admin = require_role(Role.ADMIN)
