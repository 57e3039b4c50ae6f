"""Aggregates for the IAM bounded context."""

from iam.domain.aggregates.user import User, default_display_name

__all__ = ["User", "default_display_name"]
