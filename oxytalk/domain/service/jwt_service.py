"""JWT token domain service."""

import logfire

from oxytalk.config import AuthSettings
from oxytalk.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for bearer token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, identity_id: str, display_name: str) -> str:
        """Create a bearer token for an identity.

        Args:
            identity_id: Identity ID
            display_name: Identity display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", identity_id=identity_id):
            token = create_token(identity_id, display_name, self.auth_settings)
            logfire.info("JWT token created", identity_id=identity_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", identity_id=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
