"""Get current identity use case."""

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.error import UnauthenticatedError
from oxytalk.domain.service import IdentityService


class GetCurrentIdentityRequest(UseCaseModel):
    """Get current identity request."""

    token: str | None = None  # Bearer token


class GetCurrentIdentityResponse(UseCaseModel):
    """The identity a bearer token belongs to."""

    identity_id: str
    display_name: str
    avatar_url: str | None = None


class GetCurrentIdentityUseCase:
    """Use case for resolving the caller's identity."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize get current identity use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(
        self, request: GetCurrentIdentityRequest
    ) -> GetCurrentIdentityResponse:
        """Execute get current identity flow.

        Raises:
            UnauthenticatedError: If the token is missing, invalid, or belongs
                to an unknown identity
        """
        identity = await self.identity_service.resolve_by_token(request.token)
        if identity is None:
            raise UnauthenticatedError()

        return GetCurrentIdentityResponse(
            identity_id=identity.id,
            display_name=identity.display_name,
            avatar_url=identity.avatar_url,
        )
