"""Identity domain service.

Adapter over the external identity collaborator: resolves bearer tokens and
identity ids, and searches display names.
"""

import logfire

from oxytalk.config import MessagingSettings
from oxytalk.domain.error import NotFoundError
from oxytalk.domain.model import Identity
from oxytalk.domain.repository import IdentityDirectory
from oxytalk.domain.value import IdentityId
from oxytalk.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService


class IdentityService(Service):
    """Domain service for identity lookups."""

    def __init__(
        self,
        identity_directory: IdentityDirectory,
        jwt_service: JWTService,
        messaging_settings: MessagingSettings,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_directory: Identity directory
            jwt_service: JWT token domain service
            messaging_settings: Messaging settings (search limit)
        """
        self.identity_directory = identity_directory
        self.jwt_service = jwt_service
        self.messaging_settings = messaging_settings

    async def resolve_by_token(self, token: str | None) -> Identity | None:
        """Resolve a bearer token to the identity it was issued for.

        Args:
            token: Bearer token (optional)

        Returns:
            Identity if the token is valid and the identity exists, None otherwise
        """
        if not token:
            return None

        with logfire.span("identity_service.resolve_by_token"):
            try:
                payload = self.jwt_service.verify_token(token)
            except JWTError:
                return None

            identity = await self.identity_directory.find_by_id(IdentityId(payload.sub))
            if identity is None:
                logfire.warn("Token for unknown identity", identity_id=payload.sub)
            return identity

    async def resolve_by_id(self, identity_id: IdentityId) -> Identity | None:
        """Resolve an identity id.

        Args:
            identity_id: Identity ID

        Returns:
            Identity if found, None otherwise
        """
        return await self.identity_directory.find_by_id(identity_id)

    async def get_by_id(self, identity_id: IdentityId) -> Identity:
        """Get an identity that must exist.

        Raises:
            NotFoundError: If the identity is unknown
        """
        identity = await self.identity_directory.find_by_id(identity_id)
        if identity is None:
            raise NotFoundError("Identity", identity_id)
        return identity

    async def search(self, query: str, excluding: IdentityId) -> list[Identity]:
        """Search identities by display name prefix.

        Args:
            query: Display name prefix, case-insensitive
            excluding: The searching identity, never part of the results

        Returns:
            At most ``search_limit`` identities; none for a blank query
        """
        query = query.strip()
        if not query:
            return []

        with logfire.span("identity_service.search", query=query):
            results = await self.identity_directory.search_by_display_name_prefix(
                query, excluding, self.messaging_settings.search_limit
            )
            logfire.info("Identity search", query=query, count=len(results))
            return results
