"""FastAPI application factory for the public dashboard API.

Routes mirror the data the Streamlit dashboard reads so that a separate
frontend can render the same summaries:

    /api/wealth-data            raw snapshots, summary and latest snapshot
    /api/financial-goals        goals with progress, milestones and overview
    /api/blog-posts             published, searched, featured, single and
                                related posts
    /api/contact                contact form submissions
    /api/newsletter/subscribe   newsletter subscriptions
"""

from dataclasses import dataclass
from datetime import datetime
import time

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.api.exception_handlers import setup_exception_handlers
from src.adapters.api.schemas import ContactRequest, SubscribeRequest
from src.adapters.serializers import to_payload
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases import (
    GetBlogPostsUseCase,
    GetGoalsUseCase,
    GetLatestWealthEntryUseCase,
    GetWealthSummaryUseCase,
    ManageGoalMilestonesUseCase,
    ManageWealthEntriesUseCase,
    SubmitContactMessageUseCase,
    SubscribeNewsletterUseCase,
)
from src.domain.errors import EntityNotFoundError
from src.domain.services.blog_search import DEFAULT_POST_SORT, search_posts
from src.domain.services.wealth import filter_entries_by_period
from src.infrastructure.container import (
    build_blog_repository,
    build_database_adapter,
    build_goals_repository,
    build_messages_repository,
    build_settings,
    build_wealth_repository,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import DashboardSettings


@dataclass(frozen=True)
class ApiServices:
    """Use cases shared by the API routes."""

    wealth_summary: GetWealthSummaryUseCase
    latest_wealth: GetLatestWealthEntryUseCase
    wealth_entries: ManageWealthEntriesUseCase
    goals: GetGoalsUseCase
    milestones: ManageGoalMilestonesUseCase
    blog_posts: GetBlogPostsUseCase
    contact: SubmitContactMessageUseCase
    newsletter: SubscribeNewsletterUseCase


def build_services(
    db_port: DatabaseEnginePort,
    settings: DashboardSettings,
) -> ApiServices:
    """Wire the use cases against one database adapter."""
    wealth_repository = build_wealth_repository(db_port)
    goals_repository = build_goals_repository(db_port)
    messages_repository = build_messages_repository(db_port)
    return ApiServices(
        wealth_summary=GetWealthSummaryUseCase(
            wealth_repository,
            include_zero_allocations=settings.include_zero_allocations,
        ),
        latest_wealth=GetLatestWealthEntryUseCase(wealth_repository),
        wealth_entries=ManageWealthEntriesUseCase(wealth_repository),
        goals=GetGoalsUseCase(goals_repository),
        milestones=ManageGoalMilestonesUseCase(goals_repository),
        blog_posts=GetBlogPostsUseCase(
            build_blog_repository(db_port),
            related_limit=settings.related_posts_limit,
        ),
        contact=SubmitContactMessageUseCase(messages_repository),
        newsletter=SubscribeNewsletterUseCase(messages_repository),
    )


def get_services(request: Request) -> ApiServices:
    """Return the services attached to the running application."""
    return request.app.state.services


wealth_router = APIRouter(prefix="/api/wealth-data", tags=["wealth"])
goals_router = APIRouter(prefix="/api/financial-goals", tags=["goals"])
blog_router = APIRouter(prefix="/api/blog-posts", tags=["blog"])
visitors_router = APIRouter(prefix="/api", tags=["visitors"])


@wealth_router.get("")
def list_wealth_data(
    category: str | None = None,
    period: str | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return raw snapshots, oldest first, optionally of a trailing period."""
    entries = services.wealth_entries.list_entries(category)
    return to_payload(
        filter_entries_by_period(entries, period, now=datetime.now())
    )


@wealth_router.get("/summary")
def get_wealth_summary(
    category: str | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return one summary per category."""
    summaries = services.wealth_summary.execute(category)
    return {"categories": to_payload(summaries)}


@wealth_router.get("/latest")
def get_latest_wealth_data(
    category: str | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return the latest raw snapshot or 404 when none is stored."""
    entry = services.latest_wealth.execute(category)
    if entry is None:
        raise EntityNotFoundError("Wealth data", category or "all")
    return to_payload(entry)


@goals_router.get("/public")
def list_public_goals(
    category: str | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return goals paired with their progress."""
    return to_payload(services.goals.execute(category))


@goals_router.get("/{goal_id}/milestones")
def list_goal_milestones(
    goal_id: str,
    services: ApiServices = Depends(get_services),
):
    """Return the milestones of a goal, smallest amount first."""
    return to_payload(services.milestones.list_milestones(goal_id))


@goals_router.get("/overview")
def get_goals_overview(
    category: str | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return the goals overview counters."""
    return to_payload(services.goals.overview(category))


@blog_router.get("")
def list_blog_posts(
    category: str | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return published posts, newest first."""
    return to_payload(services.blog_posts.list_posts(category))


@blog_router.get("/search")
def search_blog_posts(
    q: str | None = None,
    category: str | None = None,
    tag: str | None = None,
    sort: str = DEFAULT_POST_SORT,
    services: ApiServices = Depends(get_services),
):
    """Return published posts matching a text, category and tag filter."""
    posts = services.blog_posts.list_posts(None)
    return to_payload(
        search_posts(posts, term=q, category=category, tag=tag, sort=sort)
    )


@blog_router.get("/featured")
def list_featured_posts(services: ApiServices = Depends(get_services)):
    """Return featured published posts."""
    return to_payload(services.blog_posts.featured())


@blog_router.get("/{slug}")
def get_blog_post(slug: str, services: ApiServices = Depends(get_services)):
    """Return a published post and count the view."""
    post = services.blog_posts.get_by_slug(slug)
    if post is None:
        raise EntityNotFoundError("Blog post", slug)
    return to_payload(post)


@blog_router.get("/{slug}/related")
def list_related_posts(
    slug: str,
    limit: int | None = None,
    services: ApiServices = Depends(get_services),
):
    """Return the posts most related to a post."""
    related = services.blog_posts.related(slug, limit)
    if related is None:
        raise EntityNotFoundError("Blog post", slug)
    return to_payload(related)


@visitors_router.post("/contact", status_code=status.HTTP_201_CREATED)
def submit_contact(
    body: ContactRequest,
    services: ApiServices = Depends(get_services),
):
    """Store a contact form submission."""
    message = services.contact.execute(body.model_dump())
    return {"message": "Message received", "id": message.id}


@visitors_router.post(
    "/newsletter/subscribe",
    status_code=status.HTTP_201_CREATED,
)
def subscribe_newsletter(
    body: SubscribeRequest,
    services: ApiServices = Depends(get_services),
):
    """Subscribe an email address to the newsletter."""
    subscription = services.newsletter.execute(body.email)
    return {"message": "Subscribed", "email": subscription.email}


def create_app(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        db_port: Optional database adapter; defaults to DATABASE_URL.
        settings: Optional settings; defaults to the environment.

    Returns:
        FastAPI: Configured application with routes and error handlers.
    """
    resolved_settings = settings or build_settings()
    resolved_db = db_port or build_database_adapter()

    app = FastAPI(title="PathTwo API")
    app.state.services = build_services(resolved_db, resolved_settings)

    if resolved_settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(resolved_settings.cors_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    usage_logger = get_usage_logger()

    @app.middleware("http")
    async def log_usage(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        usage_logger.info(
            f"api {request.method} {request.url.path} "
            f"status={response.status_code} duration_ms={elapsed_ms:.1f}"
        )
        return response

    setup_exception_handlers(app)
    for router in (wealth_router, goals_router, blog_router, visitors_router):
        app.include_router(router)
    return app


__all__ = ["ApiServices", "build_services", "create_app", "get_services"]
