"""seo_gateway.errors: исключения пакета."""

from __future__ import annotations

__all__ = ["GatewayError", "ContactValidationError", "MailDeliveryError"]


class GatewayError(Exception):
    """Base class for errors raised inside seo_gateway."""


class ContactValidationError(GatewayError):
    """A contact form submission is missing required fields."""


class MailDeliveryError(GatewayError):
    """The mail API rejected the message or could not be reached."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
