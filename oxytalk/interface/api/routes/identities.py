"""Identity routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Security
from fastapi.security import HTTPAuthorizationCredentials

from oxytalk.application.usecase.identity import (
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
    SearchIdentitiesRequest,
    SearchIdentitiesResponse,
    SearchIdentitiesUseCase,
)
from oxytalk.interface.api.auth import authenticate, bearer_scheme

router = APIRouter(tags=["identities"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentIdentityResponse)
async def get_me(
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> GetCurrentIdentityResponse:
    """Get the identity the bearer token belongs to.

    Raises:
        UnauthenticatedError: If not authenticated (401)
    """
    return await authenticate(current_identity_use_case, credentials)


@router.get("/identities/search", response_model=SearchIdentitiesResponse)
async def search_identities(
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    search_use_case: FromDishka[SearchIdentitiesUseCase],
    q: str = Query(default="", max_length=64),
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> SearchIdentitiesResponse:
    """Search identities by display name prefix, to find someone to invite.

    The caller is never part of the results; a blank query returns nothing.

    Example:
        GET /identities/search?q=al

        Response:
        {
            "results": [
                {"identityId": "u-17", "displayName": "Alice", "avatarUrl": null}
            ]
        }
    """
    me = await authenticate(current_identity_use_case, credentials)
    return await search_use_case.execute(
        SearchIdentitiesRequest(identity_id=me.identity_id, query=q)
    )
