"""Domain-Oriented Observability for the messaging application layer."""

from messaging.application.observability.message_service_probe import (
    DefaultMessageServiceProbe,
    MessageServiceProbe,
)

__all__ = ["MessageServiceProbe", "DefaultMessageServiceProbe"]
