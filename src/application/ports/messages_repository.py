"""Port for contact messages and newsletter subscriptions."""

from typing import Protocol

from src.domain.models import ContactMessage, NewsletterSubscription


class MessagesRepositoryPort(Protocol):
    """Port exposing visitor message storage."""

    def create_contact_message(
        self,
        values: dict[str, str],
    ) -> ContactMessage:
        """Store a contact message and return it."""

    def fetch_contact_messages(self) -> list[ContactMessage]:
        """Return contact messages, newest first."""

    def fetch_subscription(self, email: str) -> NewsletterSubscription | None:
        """Return the subscription for an email address."""

    def create_subscription(self, email: str) -> NewsletterSubscription:
        """Store a newsletter subscription and return it."""


__all__ = ["MessagesRepositoryPort"]
