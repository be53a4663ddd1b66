"""Domain services."""

from .base import Service
from .contact_service import ContactCheck, ContactService, ContactView
from .identity_service import IdentityService
from .invite_service import IncomingInvite, InviteResponse, InviteService
from .jwt_service import JWTService
from .message_router import MessageRouter
from .presence import PresenceObserver, PresenceRegistry

__all__ = [
    "ContactCheck",
    "ContactService",
    "ContactView",
    "IdentityService",
    "IncomingInvite",
    "InviteResponse",
    "InviteService",
    "JWTService",
    "MessageRouter",
    "PresenceObserver",
    "PresenceRegistry",
    "Service",
]
