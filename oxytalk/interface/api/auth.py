"""Bearer token authentication for HTTP routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from oxytalk.application.usecase.identity import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
)

# auto_error=False: a missing token is reported as our own 401 error body
bearer_scheme = HTTPBearer(auto_error=False)


async def authenticate(
    use_case: GetCurrentIdentityUseCase,
    credentials: HTTPAuthorizationCredentials | None,
) -> GetCurrentIdentityResponse:
    """Resolve the caller from the bearer credentials.

    Raises:
        UnauthenticatedError: If no bearer token was sent or it is invalid
    """
    token = credentials.credentials if credentials else None
    return await use_case.execute(GetCurrentIdentityRequest(token=token))
