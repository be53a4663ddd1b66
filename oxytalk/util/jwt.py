"""JWT token utilities.

The identity service issues bearer tokens; this module verifies them. Token
creation is kept for tooling and tests, which need tokens the verifier accepts.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from oxytalk.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Identity ID
    name: str  # Display name at issuance time
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(identity_id: str, display_name: str, settings: AuthSettings) -> str:
    """Create a JWT token for an identity.

    Args:
        identity_id: Identity ID
        display_name: Identity display name
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": identity_id,
        "name": display_name,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
