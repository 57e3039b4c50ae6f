"""Domain exceptions for the messaging bounded context."""


class MessageNotFoundError(Exception):
    """Raised when a message does not exist or is not visible to the caller."""

    pass
