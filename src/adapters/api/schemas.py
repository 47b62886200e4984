"""Request bodies accepted by the JSON API."""

from pydantic import BaseModel


class ContactRequest(BaseModel):
    """Contact form submission."""

    name: str
    email: str
    subject: str
    message: str


class SubscribeRequest(BaseModel):
    """Newsletter subscription request."""

    email: str


__all__ = ["ContactRequest", "SubscribeRequest"]
