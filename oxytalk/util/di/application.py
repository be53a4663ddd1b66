"""Application layer DI providers."""

from dishka import Scope, provide

from oxytalk.application.usecase.chat import ClearHistoryUseCase, GetHistoryUseCase
from oxytalk.application.usecase.contact import (
    CheckContactUseCase,
    ListContactsUseCase,
)
from oxytalk.application.usecase.identity import (
    GetCurrentIdentityUseCase,
    SearchIdentitiesUseCase,
)
from oxytalk.application.usecase.invite import (
    ListIncomingInvitesUseCase,
    RespondInviteUseCase,
    SendInviteUseCase,
)
from oxytalk.domain.service import (
    ContactService,
    IdentityService,
    InviteService,
    MessageRouter,
    PresenceRegistry,
)
from oxytalk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Identity use cases
    @provide(scope=Scope.REQUEST)
    def get_current_identity_use_case(
        self, identity_service: IdentityService
    ) -> GetCurrentIdentityUseCase:
        """Provide get current identity use case."""
        return GetCurrentIdentityUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_search_identities_use_case(
        self, identity_service: IdentityService
    ) -> SearchIdentitiesUseCase:
        """Provide search identities use case."""
        return SearchIdentitiesUseCase(identity_service=identity_service)

    # Contact use cases
    @provide(scope=Scope.REQUEST)
    def get_list_contacts_use_case(
        self, contact_service: ContactService, presence: PresenceRegistry
    ) -> ListContactsUseCase:
        """Provide list contacts use case."""
        return ListContactsUseCase(contact_service=contact_service, presence=presence)

    @provide(scope=Scope.REQUEST)
    def get_check_contact_use_case(
        self, contact_service: ContactService
    ) -> CheckContactUseCase:
        """Provide check contact use case."""
        return CheckContactUseCase(contact_service=contact_service)

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_send_invite_use_case(
        self, invite_service: InviteService
    ) -> SendInviteUseCase:
        """Provide send invite use case."""
        return SendInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_list_incoming_invites_use_case(
        self, invite_service: InviteService
    ) -> ListIncomingInvitesUseCase:
        """Provide list incoming invites use case."""
        return ListIncomingInvitesUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_respond_invite_use_case(
        self, invite_service: InviteService
    ) -> RespondInviteUseCase:
        """Provide respond invite use case."""
        return RespondInviteUseCase(invite_service=invite_service)

    # Chat use cases
    @provide(scope=Scope.REQUEST)
    def get_get_history_use_case(
        self, message_router: MessageRouter
    ) -> GetHistoryUseCase:
        """Provide get history use case."""
        return GetHistoryUseCase(message_router=message_router)

    @provide(scope=Scope.REQUEST)
    def get_clear_history_use_case(
        self, message_router: MessageRouter
    ) -> ClearHistoryUseCase:
        """Provide clear history use case."""
        return ClearHistoryUseCase(message_router=message_router)
