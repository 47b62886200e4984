"""Use cases for contact messages and newsletter subscriptions."""

from collections.abc import Mapping

from src.application.ports.messages_repository import MessagesRepositoryPort
from src.domain.errors import DuplicateSubscriptionError
from src.domain.models import ContactMessage, NewsletterSubscription
from src.domain.services.validation import (
    validate_contact_message,
    validate_email,
)
from src.infrastructure.logging.logger import get_app_logger


class SubmitContactMessageUseCase:
    """Store a message sent through the contact form."""

    def __init__(self, messages_repository: MessagesRepositoryPort, logger=None):
        self._messages_repository = messages_repository
        self._logger = logger or get_app_logger()

    def execute(self, payload: Mapping[str, object]) -> ContactMessage:
        """Validate and store the message."""
        message = self._messages_repository.create_contact_message(
            validate_contact_message(payload)
        )
        self._logger.info(f"Contact message received: id={message.id}")
        return message


class ListContactMessagesUseCase:
    """Return the admin inbox."""

    def __init__(self, messages_repository: MessagesRepositoryPort):
        self._messages_repository = messages_repository

    def execute(self) -> list[ContactMessage]:
        """Return contact messages, newest first."""
        return self._messages_repository.fetch_contact_messages()


class SubscribeNewsletterUseCase:
    """Subscribe an email address to the newsletter."""

    def __init__(self, messages_repository: MessagesRepositoryPort, logger=None):
        self._messages_repository = messages_repository
        self._logger = logger or get_app_logger()

    def execute(self, email: str) -> NewsletterSubscription:
        """Store a subscription.

        Raises:
            ValidationError: If the address is malformed.
            DuplicateSubscriptionError: If the address is already subscribed.
        """
        address = validate_email(email)
        if self._messages_repository.fetch_subscription(address) is not None:
            raise DuplicateSubscriptionError(address)
        subscription = self._messages_repository.create_subscription(address)
        self._logger.info(f"Newsletter subscription created: id={subscription.id}")
        return subscription


__all__ = [
    "SubmitContactMessageUseCase",
    "ListContactMessagesUseCase",
    "SubscribeNewsletterUseCase",
]
