"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires an identity and none is attached."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when an identity is not a participant of a chat channel."""

    def __init__(self, chat_id: str, identity_id: str):
        self.chat_id = chat_id
        self.identity_id = identity_id
        super().__init__(f"Identity {identity_id} is not a participant of {chat_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InviteNotFoundError(NotFoundError):
    """Raised when no pending invite with that id is addressed to the responder."""

    def __init__(self, invite_id: str):
        super().__init__("Invite", invite_id)


class InvitePendingError(DomainError):
    """Raised when a pending invite already exists for the pair, either direction."""

    def __init__(self, identity_a: str, identity_b: str):
        super().__init__(f"Invite already pending between {identity_a} and {identity_b}")


class AlreadyContactsError(DomainError):
    """Raised when inviting an identity that already is a contact."""

    def __init__(self, identity_a: str, identity_b: str):
        super().__init__(f"{identity_a} and {identity_b} are already contacts")


class SelfInviteError(DomainError):
    """Raised when an identity invites itself."""

    def __init__(self, identity_id: str):
        super().__init__(f"Identity {identity_id} cannot invite itself")


class EmptyMessageError(DomainError):
    """Raised when a message has no text after trimming."""

    def __init__(self):
        super().__init__("Message text must not be empty")


class PersistenceUnavailableError(DomainError):
    """Raised when the durable store cannot be reached or fails mid-operation."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Persistence unavailable during {operation}{detail}")
