"""Tests for contact and newsletter use cases."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.visitor_messages import (
    ListContactMessagesUseCase,
    SubmitContactMessageUseCase,
    SubscribeNewsletterUseCase,
)
from src.domain.errors import DuplicateSubscriptionError, ValidationError
from src.domain.models import ContactMessage, NewsletterSubscription


def test_submit_contact_message_stores_cleaned_payload() -> None:
    repository = MagicMock()
    repository.create_contact_message.return_value = ContactMessage(
        id="m1",
        name="Sam",
        email="sam@example.com",
        subject="Hi",
        message="Hello",
    )

    SubmitContactMessageUseCase(repository, logger=MagicMock()).execute(
        {
            "name": "Sam",
            "email": "SAM@example.com",
            "subject": "Hi",
            "message": "Hello",
        }
    )

    values = repository.create_contact_message.call_args.args[0]
    assert values["email"] == "sam@example.com"


def test_list_contact_messages_delegates() -> None:
    repository = MagicMock()
    repository.fetch_contact_messages.return_value = ["m"]

    assert ListContactMessagesUseCase(repository).execute() == ["m"]


def test_subscribe_rejects_duplicates() -> None:
    repository = MagicMock()
    repository.fetch_subscription.return_value = NewsletterSubscription(
        id="s",
        email="a@b.co",
    )

    with pytest.raises(DuplicateSubscriptionError):
        SubscribeNewsletterUseCase(repository, logger=MagicMock()).execute(
            "A@b.co"
        )
    repository.create_subscription.assert_not_called()


def test_subscribe_validates_email() -> None:
    repository = MagicMock()

    with pytest.raises(ValidationError):
        SubscribeNewsletterUseCase(repository, logger=MagicMock()).execute(
            "nope"
        )


def test_subscribe_creates_subscription() -> None:
    repository = MagicMock()
    repository.fetch_subscription.return_value = None
    repository.create_subscription.return_value = NewsletterSubscription(
        id="s",
        email="a@b.co",
    )

    result = SubscribeNewsletterUseCase(
        repository,
        logger=MagicMock(),
    ).execute("a@b.co")

    repository.create_subscription.assert_called_once_with("a@b.co")
    assert result.id == "s"
