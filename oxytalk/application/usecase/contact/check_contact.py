"""Check contact use case."""

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.service import ContactService
from oxytalk.domain.value import IdentityId


class CheckContactRequest(UseCaseModel):
    """Check contact request."""

    identity_id: str  # From auth
    other_id: str


class CheckContactResponse(UseCaseModel):
    """Contact status. The chat id is only disclosed to contacts."""

    is_contact: bool
    chat_id: str | None = None


class CheckContactUseCase:
    """Use case for checking whether the caller may chat with someone."""

    def __init__(self, contact_service: ContactService) -> None:
        """Initialize check contact use case.

        Args:
            contact_service: Contact graph domain service
        """
        self.contact_service = contact_service

    async def execute(self, request: CheckContactRequest) -> CheckContactResponse:
        check = await self.contact_service.check_contact(
            IdentityId(request.identity_id), IdentityId(request.other_id)
        )
        return CheckContactResponse(
            is_contact=check.is_contact,
            chat_id=str(check.chat_id) if check.chat_id else None,
        )
