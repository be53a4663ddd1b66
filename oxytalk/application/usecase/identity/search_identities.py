"""Search identities use case."""

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.service import IdentityService
from oxytalk.domain.value import IdentityId


class IdentityItem(UseCaseModel):
    """Identity in search results."""

    identity_id: str
    display_name: str
    avatar_url: str | None = None


class SearchIdentitiesRequest(UseCaseModel):
    """Search identities request."""

    identity_id: str  # The searcher, from auth
    query: str


class SearchIdentitiesResponse(UseCaseModel):
    """Search identities response."""

    results: list[IdentityItem]


class SearchIdentitiesUseCase:
    """Use case for finding someone to invite."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize search identities use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: SearchIdentitiesRequest) -> SearchIdentitiesResponse:
        identities = await self.identity_service.search(
            request.query, excluding=IdentityId(request.identity_id)
        )
        return SearchIdentitiesResponse(
            results=[
                IdentityItem(
                    identity_id=identity.id,
                    display_name=identity.display_name,
                    avatar_url=identity.avatar_url,
                )
                for identity in identities
            ]
        )
