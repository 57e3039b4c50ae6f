"""ORM models for the IAM context."""

from iam.infrastructure.models.user import UserModel

__all__ = ["UserModel"]
