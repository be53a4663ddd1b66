"""Test configuration and fixtures."""

import logfire

from oxytalk.config import Settings
from oxytalk.domain.model import Identity
from oxytalk.domain.value import IdentityId
from oxytalk.util.jwt import create_token

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_identity(
    identity_id: str,
    display_name: str | None = None,
    avatar_url: str | None = None,
) -> Identity:
    """Helper function to build test identities.

    Args:
        identity_id: Opaque identity id
        display_name: Defaults to the id, capitalized
        avatar_url: Optional avatar URL

    Returns:
        Identity entity
    """
    return Identity(
        id=IdentityId(identity_id),
        display_name=display_name or identity_id.capitalize(),
        avatar_url=avatar_url,
    )


def make_token(identity: Identity) -> str:
    """Helper function to mint a bearer token the default settings accept."""
    return create_token(identity.id, identity.display_name, Settings().auth)
