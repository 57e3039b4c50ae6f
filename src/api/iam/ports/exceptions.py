"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors raised by the application
services. The presentation layer translates them to HTTP errors.
"""


class UserNotFoundError(Exception):
    """Raised when a user id does not match any local record."""

    pass


class IdentityProvisioningError(Exception):
    """Raised when a verified token cannot be linked to a local user.

    Typically the provider did not report an email for a first-seen subject.
    """

    pass


class InvalidProfileError(Exception):
    """Raised when a profile update breaks a field rule (e.g. name too short)."""

    pass


class ProviderAuthenticationError(Exception):
    """Raised when the identity provider rejects a credential exchange."""

    pass


class ProviderUnavailableError(Exception):
    """Raised when the identity provider cannot be reached or misbehaves."""

    pass
