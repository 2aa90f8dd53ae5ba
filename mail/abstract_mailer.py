"""Mail transport abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MailDeliveryError(Exception):
    """Raised when a message could not be handed to the transport."""


class AbstractMailer(ABC):
    """Interface for outgoing mail transports."""

    @abstractmethod
    def send(
        self,
        sender: str,
        recipient: str,
        subject: str,
        body: str,
        *,
        timeout: float | None = None,
    ) -> None:
        """Deliver a plain-text message or raise ``MailDeliveryError``."""
