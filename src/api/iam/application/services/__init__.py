"""Application services for the IAM context: sign-in identity and users."""

from iam.application.services.authenticator import BearerAuthenticator
from iam.application.services.user_service import UserService

__all__ = ["BearerAuthenticator", "UserService"]
