"""Identity use cases."""

from oxytalk.application.usecase.identity.get_current_identity import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
)
from oxytalk.application.usecase.identity.search_identities import (
    IdentityItem,
    SearchIdentitiesRequest,
    SearchIdentitiesResponse,
    SearchIdentitiesUseCase,
)

__all__ = [
    "GetCurrentIdentityRequest",
    "GetCurrentIdentityResponse",
    "GetCurrentIdentityUseCase",
    "IdentityItem",
    "SearchIdentitiesRequest",
    "SearchIdentitiesResponse",
    "SearchIdentitiesUseCase",
]
