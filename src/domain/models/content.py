"""Domain models for blog posts and visitor messages."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class BlogPost:
    """A blog article."""

    id: str
    title: str
    slug: str
    content: str
    excerpt: str
    category: str
    read_time: int = 1
    views: int = 0
    featured: bool = False
    status: str = "draft"
    tags: tuple[str, ...] = field(default_factory=tuple)
    series_id: str | None = None
    image_url: str | None = None
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        """Return True when the post is publicly visible."""
        return self.status == "published"


@dataclass(frozen=True)
class RelatedPost:
    """A post ranked against another post."""

    post: BlogPost
    score: int


@dataclass(frozen=True)
class ContactMessage:
    """A message sent through the contact form."""

    id: str
    name: str
    email: str
    subject: str
    message: str
    submitted_at: datetime | None = None


@dataclass(frozen=True)
class NewsletterSubscription:
    """A newsletter subscriber."""

    id: str
    email: str
    subscribed_at: datetime | None = None
    active: bool = True


__all__ = [
    "BlogPost",
    "RelatedPost",
    "ContactMessage",
    "NewsletterSubscription",
]
