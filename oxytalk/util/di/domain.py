"""Domain layer DI providers."""

from dishka import Scope, provide

from oxytalk.config import AuthSettings, MessagingSettings
from oxytalk.domain.repository import (
    ContactRepository,
    IdentityDirectory,
    InviteRepository,
    MessageRepository,
)
from oxytalk.domain.service import (
    ContactService,
    IdentityService,
    InviteService,
    JWTService,
    MessageRouter,
    PresenceRegistry,
)
from oxytalk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services over the contact graph and invites are REQUEST-scoped to align
    with repository/session lifecycle. Presence and the message router hold
    live connection state and are shared by the whole process.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self,
        identity_directory: IdentityDirectory,
        jwt_service: JWTService,
        messaging_settings: MessagingSettings,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_directory=identity_directory,
            jwt_service=jwt_service,
            messaging_settings=messaging_settings,
        )

    @provide
    def get_contact_service(
        self,
        contact_repository: ContactRepository,
        identity_directory: IdentityDirectory,
    ) -> ContactService:
        """Provide contact graph domain service."""
        return ContactService(
            contact_repository=contact_repository,
            identity_directory=identity_directory,
        )

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        contact_service: ContactService,
        identity_directory: IdentityDirectory,
        message_repository: MessageRepository,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            contact_service=contact_service,
            identity_directory=identity_directory,
            message_repository=message_repository,
        )

    @provide(scope=Scope.APP)
    def get_presence_registry(self) -> PresenceRegistry:
        """Provide the process-wide presence registry."""
        return PresenceRegistry()

    @provide(scope=Scope.APP)
    def get_message_router(
        self,
        message_repository: MessageRepository,
        messaging_settings: MessagingSettings,
    ) -> MessageRouter:
        """Provide the process-wide message router."""
        return MessageRouter(
            message_repository=message_repository,
            messaging_settings=messaging_settings,
        )
