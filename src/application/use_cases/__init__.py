"""Application use cases package."""

from .get_blog_posts import GetBlogPostsUseCase
from .get_goals import GetGoalsUseCase
from .get_latest_wealth_entry import GetLatestWealthEntryUseCase
from .get_wealth_summary import GetWealthSummaryUseCase
from .manage_blog_posts import ManageBlogPostsUseCase
from .manage_goals import ManageGoalMilestonesUseCase, ManageGoalsUseCase
from .manage_wealth_entries import ManageWealthEntriesUseCase
from .visitor_messages import (
    ListContactMessagesUseCase,
    SubmitContactMessageUseCase,
    SubscribeNewsletterUseCase,
)

__all__ = [
    "GetBlogPostsUseCase",
    "GetGoalsUseCase",
    "GetLatestWealthEntryUseCase",
    "GetWealthSummaryUseCase",
    "ListContactMessagesUseCase",
    "ManageBlogPostsUseCase",
    "ManageGoalMilestonesUseCase",
    "ManageGoalsUseCase",
    "ManageWealthEntriesUseCase",
    "SubmitContactMessageUseCase",
    "SubscribeNewsletterUseCase",
]
