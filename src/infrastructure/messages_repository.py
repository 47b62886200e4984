"""SQLAlchemy-backed repository for contact messages and subscribers."""

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.messages_repository import MessagesRepositoryPort
from src.domain.models import ContactMessage, NewsletterSubscription
from src.infrastructure._mapping import (
    new_id,
    row_to_contact_message,
    row_to_subscription,
)
from src.infrastructure.schema import (
    contact_submissions,
    newsletter_subscriptions,
)


class SqlAlchemyMessagesRepository(MessagesRepositoryPort):
    """Repository backed by the contact and newsletter tables."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._db_port = db_port
        self._clock = clock

    def create_contact_message(self, values: dict[str, str]) -> ContactMessage:
        message_id = new_id()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(contact_submissions).values(
                    id=message_id,
                    submitted_at=self._clock(),
                    **values,
                )
            )
            row = conn.execute(
                select(contact_submissions).where(
                    contact_submissions.c.id == message_id
                )
            ).first()
        return row_to_contact_message(row)

    def fetch_contact_messages(self) -> list[ContactMessage]:
        query = select(contact_submissions).order_by(
            contact_submissions.c.submitted_at.desc(),
            contact_submissions.c.id.asc(),
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [row_to_contact_message(row) for row in rows]

    def fetch_subscription(self, email: str) -> NewsletterSubscription | None:
        query = select(newsletter_subscriptions).where(
            newsletter_subscriptions.c.email == email
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row_to_subscription(row) if row else None

    def create_subscription(self, email: str) -> NewsletterSubscription:
        subscription_id = new_id()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(newsletter_subscriptions).values(
                    id=subscription_id,
                    email=email,
                    subscribed_at=self._clock(),
                    active=True,
                )
            )
        return self.fetch_subscription(email)


__all__ = ["SqlAlchemyMessagesRepository"]
