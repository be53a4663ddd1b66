"""Contact routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Security
from fastapi.security import HTTPAuthorizationCredentials

from oxytalk.application.usecase.contact import (
    CheckContactRequest,
    CheckContactResponse,
    CheckContactUseCase,
    ListContactsRequest,
    ListContactsResponse,
    ListContactsUseCase,
)
from oxytalk.application.usecase.identity import GetCurrentIdentityUseCase
from oxytalk.interface.api.auth import authenticate, bearer_scheme

router = APIRouter(prefix="/contacts", tags=["contacts"], route_class=DishkaRoute)


@router.get("", response_model=ListContactsResponse)
async def list_contacts(
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    list_contacts_use_case: FromDishka[ListContactsUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ListContactsResponse:
    """List the caller's contacts, oldest first, with their chat ids and presence."""
    me = await authenticate(current_identity_use_case, credentials)
    return await list_contacts_use_case.execute(
        ListContactsRequest(identity_id=me.identity_id)
    )


@router.get("/{identity_id}", response_model=CheckContactResponse)
async def check_contact(
    identity_id: str,
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    check_contact_use_case: FromDishka[CheckContactUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> CheckContactResponse:
    """Check whether the caller and another identity are contacts.

    The chat id is only returned when they are.
    """
    me = await authenticate(current_identity_use_case, credentials)
    return await check_contact_use_case.execute(
        CheckContactRequest(identity_id=me.identity_id, other_id=identity_id)
    )
