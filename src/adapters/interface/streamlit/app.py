"""Streamlit dashboard entry point."""

from collections.abc import Mapping, Sequence
from datetime import date, datetime, time
from decimal import Decimal
from functools import partial

import streamlit as st

from src.adapters.interface.streamlit.admin_session import get_admin_session
from src.adapters.interface.streamlit.charts import (
    ASSET_PALETTE,
    DEBT_PALETTE,
    build_cash_flow_figure,
    build_cash_flow_model,
    build_donut_chart,
    build_trend_chart,
    format_currency,
    format_percent,
    prepare_allocation_data,
    prepare_trend_data,
)
from src.application.use_cases import (
    GetBlogPostsUseCase,
    GetGoalsUseCase,
    GetWealthSummaryUseCase,
    ListContactMessagesUseCase,
    ManageBlogPostsUseCase,
    ManageGoalMilestonesUseCase,
    ManageGoalsUseCase,
    ManageWealthEntriesUseCase,
    SubmitContactMessageUseCase,
    SubscribeNewsletterUseCase,
)
from src.domain.constants import (
    BLOG_CATEGORIES,
    DEFAULT_FIRE_TARGET,
    DEFAULT_WEALTH_CATEGORY,
    GOAL_PRIORITIES,
    GOAL_TYPES,
    POST_SORTS,
    POST_STATUSES,
    WEALTH_CATEGORIES,
    WEALTH_PERIOD_DAYS,
)
from src.domain.errors import DuplicateSubscriptionError, PathTwoError
from src.domain.models import (
    BlogPost,
    ContactMessage,
    FinancialGoal,
    GoalMilestone,
    GoalProgress,
    GoalsOverview,
    RelatedPost,
    WealthEntry,
    WealthSummaryCategory,
)
from src.domain.services.blog_search import collect_facets, search_posts
from src.domain.services.goals import (
    calculate_fire_progress,
    estimate_years_to_fire,
    milestone_completion,
    milestone_share,
)
from src.domain.services.wealth import filter_entries_by_period
from src.infrastructure.container import (
    build_blog_repository,
    build_goals_repository,
    build_messages_repository,
    build_settings,
    build_wealth_repository,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import DashboardSettings
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import parse_decimal_or_default

PAGES = ["Dashboard", "Goals", "Blog", "Admin"]

VIEWED_POSTS_KEY = "viewed_posts"

PERIOD_LABELS = {
    "all": "All time",
    "30d": "Last 30 days",
    "90d": "Last 90 days",
    "1y": "Last year",
}


def _fetch_settings() -> DashboardSettings:
    """Read dashboard settings from the environment."""
    return build_settings()


@st.cache_data(show_spinner=False)
def _load_settings() -> DashboardSettings:
    """Cached wrapper around _fetch_settings."""
    return _fetch_settings()


def _fetch_wealth_summary(
    category: str,
    include_zero_allocations: bool,
) -> WealthSummaryCategory:
    """Build the wealth summary of one category."""
    use_case = GetWealthSummaryUseCase(
        build_wealth_repository(),
        include_zero_allocations=include_zero_allocations,
    )
    return use_case.execute_one(category)


@st.cache_data(show_spinner=False, ttl=300)
def _load_wealth_summary(
    category: str,
    include_zero_allocations: bool = True,
) -> WealthSummaryCategory:
    """Cached wrapper around _fetch_wealth_summary."""
    return _fetch_wealth_summary(category, include_zero_allocations)


def _fetch_goals(category: str | None) -> list[GoalProgress]:
    """Fetch goals of a category, or of every category, with progress."""
    return GetGoalsUseCase(build_goals_repository()).execute(category)


@st.cache_data(show_spinner=False, ttl=300)
def _load_goals(category: str) -> list[GoalProgress]:
    """Cached wrapper around _fetch_goals."""
    return _fetch_goals(category)


def _fetch_milestones(goal_id: str) -> list[GoalMilestone]:
    return ManageGoalMilestonesUseCase(build_goals_repository()).list_milestones(
        goal_id
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_milestones(goal_id: str) -> list[GoalMilestone]:
    """Cached wrapper around _fetch_milestones."""
    return _fetch_milestones(goal_id)


def _fetch_wealth_entries(category: str | None) -> list[WealthEntry]:
    """Fetch stored snapshots, oldest first."""
    return ManageWealthEntriesUseCase(build_wealth_repository()).list_entries(
        category
    )


def _fetch_goals_overview(category: str) -> GoalsOverview:
    """Fetch the goals overview of a category."""
    return GetGoalsUseCase(build_goals_repository()).overview(category)


def _fetch_blog_posts(category: str | None) -> list[BlogPost]:
    """Fetch published posts, optionally filtered by category."""
    settings = _load_settings()
    use_case = GetBlogPostsUseCase(
        build_blog_repository(),
        related_limit=settings.related_posts_limit,
    )
    return use_case.list_posts(category)


@st.cache_data(show_spinner=False, ttl=300)
def _load_blog_posts(category: str | None) -> list[BlogPost]:
    """Cached wrapper around _fetch_blog_posts."""
    return _fetch_blog_posts(category)


def _fetch_admin_posts() -> list[BlogPost]:
    """Fetch every post, drafts included."""
    use_case = GetBlogPostsUseCase(build_blog_repository())
    return use_case.list_posts(None, include_drafts=True)


def _fetch_blog_post(slug: str) -> tuple[BlogPost | None, list[RelatedPost]]:
    """Fetch a post and rank related posts.

    A view is counted the first time a session opens the post; later
    reruns of the same session read it without counting again.
    """
    settings = _load_settings()
    use_case = GetBlogPostsUseCase(
        build_blog_repository(),
        related_limit=settings.related_posts_limit,
    )
    viewed = st.session_state.setdefault(VIEWED_POSTS_KEY, set())
    post = use_case.get_by_slug(slug, count_view=slug not in viewed)
    if post is None:
        return None, []
    viewed.add(slug)
    return post, use_case.related(slug) or []


def _subscribe_newsletter(email: str) -> None:
    SubscribeNewsletterUseCase(build_messages_repository()).execute(email)


def _submit_contact_message(payload: Mapping[str, object]) -> None:
    SubmitContactMessageUseCase(build_messages_repository()).execute(payload)


def _fetch_contact_messages() -> list[ContactMessage]:
    return ListContactMessagesUseCase(build_messages_repository()).execute()


def _create_wealth_entry(payload: Mapping[str, object]) -> None:
    ManageWealthEntriesUseCase(build_wealth_repository()).create(payload)


def _update_wealth_entry(entry_id: str, payload: Mapping[str, object]) -> None:
    ManageWealthEntriesUseCase(build_wealth_repository()).update(
        entry_id, payload
    )


def _delete_wealth_entry(entry_id: str) -> None:
    ManageWealthEntriesUseCase(build_wealth_repository()).delete(entry_id)


def _create_goal(payload: Mapping[str, object]) -> None:
    ManageGoalsUseCase(build_goals_repository()).create(payload)


def _update_goal(goal_id: str, payload: Mapping[str, object]) -> None:
    ManageGoalsUseCase(build_goals_repository()).update(goal_id, payload)


def _complete_goal(goal_id: str) -> None:
    ManageGoalsUseCase(build_goals_repository()).complete(goal_id)


def _delete_goal(goal_id: str) -> None:
    ManageGoalsUseCase(build_goals_repository()).delete(goal_id)


def _create_milestone(payload: Mapping[str, object]) -> None:
    ManageGoalMilestonesUseCase(build_goals_repository()).create(payload)


def _complete_milestone(milestone_id: str) -> None:
    ManageGoalMilestonesUseCase(build_goals_repository()).complete(milestone_id)


def _delete_milestone(milestone_id: str) -> None:
    ManageGoalMilestonesUseCase(build_goals_repository()).delete(milestone_id)


def _create_blog_post(payload: Mapping[str, object]) -> None:
    ManageBlogPostsUseCase(build_blog_repository()).create(payload)


def _update_blog_post(post_id: str, payload: Mapping[str, object]) -> None:
    ManageBlogPostsUseCase(build_blog_repository()).update(post_id, payload)


def _delete_blog_post(post_id: str) -> None:
    ManageBlogPostsUseCase(build_blog_repository()).delete(post_id)


def _recent_wealth_entries(
    category: str | None,
    period: str,
    now: datetime,
) -> list[WealthEntry]:
    """Return the snapshots of a trailing period, newest first."""
    entries = _fetch_wealth_entries(category)
    return list(reversed(filter_entries_by_period(entries, period, now=now)))


def _goal_labels(goals: Sequence[FinancialGoal]) -> dict[str, str]:
    """Map goal ids to labels that tell same-titled goals apart."""
    labels = {}
    for goal in goals:
        label = f"{goal.title} ({goal.category})"
        if goal.is_completed:
            label = f"{label} - completed"
        labels[goal.id] = label
    return labels


def _milestone_caption(milestones: Sequence[GoalMilestone]) -> str | None:
    if not milestones:
        return None
    reached = sum(1 for milestone in milestones if milestone.is_completed)
    return (
        f"{reached} of {len(milestones)} milestones reached "
        f"({format_percent(milestone_completion(milestones))})"
    )


def _format_date(value) -> str:
    moment = coerce_datetime(value)
    return f"{moment:%Y-%m-%d}" if moment else ""


def _format_years(years: Decimal | None) -> str:
    """Format a years-to-FIRE projection."""
    if years is None:
        return "n/a"
    if years == 0:
        return "Reached"
    return f"{years:.1f} yrs"


def _dashboard_metrics(
    summary: WealthSummaryCategory,
    default_fire_target: Decimal = DEFAULT_FIRE_TARGET,
) -> list[tuple[str, str, str | None]]:
    """Return the headline metrics as (label, value, delta) triples.

    Args:
        summary: Wealth summary of the selected category.
        default_fire_target: Target used when the snapshot has none.

    Returns:
        Metrics in display order; an empty list when there is no data.
    """
    latest = summary.latest
    if latest is None:
        return []
    target = latest.fire_target if latest.fire_target > 0 else default_fire_target
    progress = calculate_fire_progress(latest, default_fire_target)
    years = estimate_years_to_fire(
        latest.net_worth,
        target,
        latest.monthly_savings,
    )
    growth = summary.monthly_growth
    sign = "+" if growth >= 0 else ""
    return [
        ("Net Worth", format_currency(latest.net_worth), f"{sign}{growth:.2f}%"),
        ("FIRE Progress", format_percent(progress), None),
        ("Savings Rate", format_percent(latest.savings_rate), None),
        ("Avg Savings Rate", format_percent(summary.average_savings_rate), None),
        ("Years to FIRE", _format_years(years), None),
    ]


def _render_metrics(metrics: Sequence[tuple[str, str, str | None]]) -> None:
    columns = st.columns(len(metrics))
    for column, (label, value, delta) in zip(columns, metrics):
        column.metric(label, value, delta)


def _render_allocation(
    points,
    title: str,
    empty_message: str,
    palette: Sequence[str],
    celebrate_empty: bool = False,
) -> None:
    """Render an allocation donut or its empty state."""
    st.subheader(title)
    if points is None:
        if celebrate_empty:
            st.success(empty_message)
        else:
            st.info(empty_message)
        return
    data = prepare_allocation_data(points)
    st.altair_chart(
        build_donut_chart(data, chart_size=280, palette=palette),
        width="stretch",
    )


def _render_cash_flow(summary: WealthSummaryCategory) -> None:
    st.subheader("Monthly Cash Flow")
    cash_flow = summary.cash_flow
    if cash_flow is None:
        st.info("No income or expense data for the latest snapshot.")
        return
    income_col, expenses_col, net_col = st.columns(3)
    income_col.metric("Income", format_currency(cash_flow.income))
    expenses_col.metric("Expenses", format_currency(cash_flow.expenses))
    net_col.metric("Net", format_currency(cash_flow.net))
    model = build_cash_flow_model(cash_flow)
    if model.links:
        st.plotly_chart(build_cash_flow_figure(model), width="stretch")


def _render_dashboard(category: str, settings: DashboardSettings) -> None:
    """Render the wealth dashboard of a category."""
    summary = _load_wealth_summary(
        category,
        include_zero_allocations=settings.include_zero_allocations,
    )
    if summary.total_entries == 0:
        st.info(f"No wealth data for {category} yet.")
        return

    _render_metrics(_dashboard_metrics(summary, settings.default_fire_target))
    st.caption(
        f"{summary.total_entries} snapshots from "
        f"{_format_date(summary.range.start)} to "
        f"{_format_date(summary.range.end)}"
    )

    st.subheader("Net Worth Trend")
    st.altair_chart(
        build_trend_chart(prepare_trend_data(summary.trend)),
        width="stretch",
    )

    left, right = st.columns(2)
    with left:
        _render_allocation(
            summary.asset_allocation,
            "Asset Allocation",
            "No asset allocation recorded.",
            ASSET_PALETTE,
        )
    with right:
        _render_allocation(
            summary.debt_breakdown,
            "Debt Breakdown",
            "Debt-free!",
            DEBT_PALETTE,
            celebrate_empty=True,
        )
    _render_cash_flow(summary)


def _render_goals(category: str) -> None:
    """Render the goals overview and list of a category."""
    overview = _fetch_goals_overview(category)
    goals_col, done_col, track_col, avg_col = st.columns(4)
    goals_col.metric("Active Goals", overview.active_goals)
    done_col.metric("Completed", overview.completed_goals)
    track_col.metric("On Track", overview.goals_on_track)
    avg_col.metric("Avg Progress", format_percent(overview.average_progress))

    if overview.upcoming_deadlines:
        st.subheader("Upcoming Deadlines")
        for goal in overview.upcoming_deadlines:
            st.markdown(
                f"- **{goal.title}** by {_format_date(goal.target_date)}"
            )

    goals = _load_goals(category)
    if not goals:
        st.info("No goals yet.")
        return
    st.subheader("Goals")
    for item in goals:
        goal = item.goal
        label = f"{goal.title} ({goal.priority})"
        if goal.is_completed:
            label = f"{label} - completed"
        st.markdown(f"**{label}**")
        st.progress(
            min(int(item.progress), 100),
            text=(
                f"{format_currency(parse_decimal_or_default(goal.current_amount))}"
                f" of "
                f"{format_currency(parse_decimal_or_default(goal.target_amount))}"
            ),
        )
        caption = _milestone_caption(_load_milestones(goal.id))
        if caption:
            st.caption(caption)


def _render_post(post: BlogPost, related: Sequence[RelatedPost]) -> None:
    st.header(post.title)
    st.caption(f"{post.category} · {post.read_time} min read · {post.views} views")
    st.markdown(post.content, unsafe_allow_html=True)
    if related:
        st.subheader("Related Posts")
        for item in related:
            st.markdown(f"- {item.post.title}")


def _render_newsletter_form() -> None:
    with st.form("newsletter"):
        email = st.text_input("Email")
        submitted = st.form_submit_button("Subscribe")
    if not submitted:
        return
    try:
        _subscribe_newsletter(email)
    except DuplicateSubscriptionError:
        st.warning("This email is already subscribed.")
    except PathTwoError as exc:
        st.error(str(exc))
    else:
        st.success("Subscribed!")


def _render_contact_form() -> None:
    with st.form("contact"):
        name = st.text_input("Name")
        email = st.text_input("Email", key="contact_email")
        subject = st.text_input("Subject")
        message = st.text_area("Message")
        submitted = st.form_submit_button("Send")
    if not submitted:
        return
    try:
        _submit_contact_message(
            {"name": name, "email": email, "subject": subject, "message": message}
        )
    except PathTwoError as exc:
        st.error(str(exc))
    else:
        st.success("Thanks, your message was sent.")


def _render_blog() -> None:
    """Render the searchable blog listing or a single post."""
    posts = _load_blog_posts(None)
    categories, tags = collect_facets(posts)
    category = st.sidebar.selectbox("Blog category", ["All", *categories])
    tag = st.sidebar.selectbox("Tag", ["All", *tags])
    sort = st.sidebar.selectbox("Sort by", POST_SORTS, format_func=str.title)
    term = st.text_input("Search posts")
    matches = search_posts(
        posts,
        term=term,
        category=None if category == "All" else category,
        tag=None if tag == "All" else tag,
        sort=sort,
    )
    if not posts:
        st.info("No posts published yet.")
    elif not matches:
        st.info("No posts match your search.")
    else:
        titles = {post.slug: post.title for post in matches}
        selected = st.selectbox(
            "Read a post",
            list(titles),
            format_func=titles.get,
            index=None,
        )
        if selected:
            post, related = _fetch_blog_post(selected)
            if post is None:
                st.error("This post is no longer available.")
            else:
                _render_post(post, related)
        else:
            for post in matches:
                st.markdown(f"### {post.title}")
                st.caption(f"{post.category} · {post.read_time} min read")
                st.write(post.excerpt)

    st.divider()
    news_col, contact_col = st.columns(2)
    with news_col:
        st.subheader("Newsletter")
        _render_newsletter_form()
    with contact_col:
        st.subheader("Contact")
        _render_contact_form()


def _combine_date(value: date | None) -> datetime | None:
    if value is None:
        return None
    return datetime.combine(value, time.min)


def _run_admin_action(action, payload) -> bool:
    """Run an admin write and report the outcome in the page."""
    try:
        get_admin_session(st.session_state).require()
        action(payload)
    except PathTwoError as exc:
        st.error(str(exc))
        return False
    st.cache_data.clear()
    st.success("Saved.")
    return True


def _render_wealth_form() -> None:
    with st.form("wealth_entry"):
        entry_date = st.date_input("Date", value=date.today())
        category = st.selectbox("Category", WEALTH_CATEGORIES)
        amounts = {
            name: st.number_input(label, value=0.0, step=100.0)
            for name, label in (
                ("net_worth", "Net worth"),
                ("investments", "Investments"),
                ("cash", "Cash"),
                ("liabilities", "Liabilities"),
                ("fire_target", "FIRE target"),
                ("stocks", "Stocks"),
                ("bonds", "Bonds"),
                ("real_estate", "Real estate"),
                ("crypto", "Crypto"),
                ("commodities", "Commodities"),
                ("alternative_investments", "Alternative investments"),
                ("mortgage", "Mortgage"),
                ("credit_cards", "Credit cards"),
                ("student_loans", "Student loans"),
                ("auto_loans", "Auto loans"),
                ("monthly_income", "Monthly income"),
                ("monthly_expenses", "Monthly expenses"),
                ("monthly_savings", "Monthly savings"),
            )
        }
        savings_rate = st.number_input(
            "Savings rate (%)",
            min_value=-100.0,
            max_value=100.0,
            value=0.0,
        )
        submitted = st.form_submit_button("Add snapshot")
    if submitted:
        payload = {
            "date": _combine_date(entry_date),
            "category": category,
            "savings_rate": savings_rate,
            **{name: str(value) for name, value in amounts.items()},
        }
        _run_admin_action(_create_wealth_entry, payload)


def _render_goal_form() -> None:
    with st.form("goal"):
        title = st.text_input("Title")
        category = st.selectbox("Category", WEALTH_CATEGORIES, key="goal_category")
        goal_type = st.selectbox("Type", GOAL_TYPES)
        priority = st.selectbox("Priority", GOAL_PRIORITIES, index=1)
        target_amount = st.number_input("Target amount", min_value=0.0)
        current_amount = st.number_input("Current amount", min_value=0.0)
        target_date = st.date_input("Target date", value=None)
        description = st.text_area("Description")
        submitted = st.form_submit_button("Add goal")
    if submitted:
        _run_admin_action(
            _create_goal,
            {
                "title": title,
                "category": category,
                "goal_type": goal_type,
                "priority": priority,
                "target_amount": str(target_amount),
                "current_amount": str(current_amount),
                "target_date": _combine_date(target_date),
                "description": description,
            },
        )


def _render_goal_editor() -> None:
    """Edit, complete or delete any goal and manage its milestones."""
    goals = [item.goal for item in _fetch_goals(None)]
    if not goals:
        st.info("No goals yet.")
        return
    labels = _goal_labels(goals)
    goal_id = st.selectbox(
        "Edit goal",
        list(labels),
        format_func=labels.get,
        key="admin_goal",
    )
    goal = next(goal for goal in goals if goal.id == goal_id)
    with st.form(f"goal_edit_{goal.id}"):
        title = st.text_input("Title", value=goal.title, key=f"goal_title_{goal.id}")
        priority = st.selectbox(
            "Priority",
            GOAL_PRIORITIES,
            index=GOAL_PRIORITIES.index(goal.priority)
            if goal.priority in GOAL_PRIORITIES
            else 1,
            key=f"goal_priority_{goal.id}",
        )
        target_amount = st.number_input(
            "Target amount",
            min_value=0.0,
            value=float(parse_decimal_or_default(goal.target_amount)),
            key=f"goal_target_{goal.id}",
        )
        current_amount = st.number_input(
            "Current amount",
            min_value=0.0,
            value=float(parse_decimal_or_default(goal.current_amount)),
            key=f"goal_current_{goal.id}",
        )
        saved = st.form_submit_button("Save goal")
    if saved:
        _run_admin_action(
            partial(_update_goal, goal.id),
            {
                "title": title,
                "priority": priority,
                "target_amount": str(target_amount),
                "current_amount": str(current_amount),
            },
        )

    complete_col, delete_col = st.columns(2)
    if not goal.is_completed and complete_col.button(
        "Mark goal completed",
        key=f"complete_goal_{goal.id}",
    ):
        _run_admin_action(_complete_goal, goal.id)
    if delete_col.button("Delete goal", key=f"delete_goal_{goal.id}"):
        _run_admin_action(_delete_goal, goal.id)
    _render_milestone_editor(goal)


def _render_milestone_editor(goal: FinancialGoal) -> None:
    st.subheader("Milestones")
    milestones = _fetch_milestones(goal.id)
    for milestone in milestones:
        amount = format_currency(parse_decimal_or_default(milestone.target_amount))
        share = format_percent(milestone_share(milestone, goal.target_amount))
        state = " - reached" if milestone.is_completed else ""
        st.markdown(f"- {milestone.title}: {amount} ({share}){state}")

    with st.form(f"milestone_add_{goal.id}"):
        title = st.text_input("Milestone", key=f"milestone_title_{goal.id}")
        target_amount = st.number_input(
            "Milestone amount",
            min_value=0.0,
            key=f"milestone_amount_{goal.id}",
        )
        added = st.form_submit_button("Add milestone")
    if added:
        _run_admin_action(
            _create_milestone,
            {
                "goal_id": goal.id,
                "title": title,
                "target_amount": str(target_amount),
            },
        )

    if not milestones:
        return
    titles = {milestone.id: milestone.title for milestone in milestones}
    milestone_id = st.selectbox(
        "Select milestone",
        list(titles),
        format_func=titles.get,
        key=f"milestone_pick_{goal.id}",
    )
    done_col, delete_col = st.columns(2)
    if done_col.button("Complete milestone", key=f"milestone_done_{goal.id}"):
        _run_admin_action(_complete_milestone, milestone_id)
    if delete_col.button("Delete milestone", key=f"milestone_drop_{goal.id}"):
        _run_admin_action(_delete_milestone, milestone_id)


def _render_post_form() -> None:
    with st.form("blog_post"):
        title = st.text_input("Title", key="post_title")
        slug = st.text_input("Slug (optional)")
        category = st.selectbox("Category", BLOG_CATEGORIES, key="post_category")
        excerpt = st.text_area("Excerpt")
        content = st.text_area("Content (HTML)", height=240)
        tags = st.text_input("Tags (comma separated)")
        series_id = st.text_input("Series (optional)")
        status = st.selectbox("Status", POST_STATUSES)
        featured = st.checkbox("Featured")
        submitted = st.form_submit_button("Save post")
    if submitted:
        _run_admin_action(
            _create_blog_post,
            {
                "title": title,
                "slug": slug or None,
                "category": category,
                "excerpt": excerpt,
                "content": content,
                "tags": tags,
                "series_id": series_id,
                "status": status,
                "featured": featured,
            },
        )


def _render_post_editor() -> None:
    """Edit or delete any post, drafts included."""
    posts = _fetch_admin_posts()
    if not posts:
        st.info("No posts yet.")
        return
    labels = {post.id: f"{post.title} ({post.status})" for post in posts}
    post_id = st.selectbox(
        "Edit post",
        list(labels),
        format_func=labels.get,
        key="admin_post",
    )
    post = next(post for post in posts if post.id == post_id)
    with st.form(f"post_edit_{post.id}"):
        title = st.text_input("Title", value=post.title, key=f"title_{post.id}")
        excerpt = st.text_area(
            "Excerpt",
            value=post.excerpt,
            key=f"excerpt_{post.id}",
        )
        content = st.text_area(
            "Content (HTML)",
            value=post.content,
            height=240,
            key=f"content_{post.id}",
        )
        tags = st.text_input(
            "Tags (comma separated)",
            value=", ".join(post.tags),
            key=f"tags_{post.id}",
        )
        status = st.selectbox(
            "Status",
            POST_STATUSES,
            index=POST_STATUSES.index(post.status)
            if post.status in POST_STATUSES
            else 0,
            key=f"status_{post.id}",
        )
        featured = st.checkbox(
            "Featured",
            value=post.featured,
            key=f"featured_{post.id}",
        )
        saved = st.form_submit_button("Update post")
    if saved:
        _run_admin_action(
            partial(_update_blog_post, post.id),
            {
                "title": title,
                "excerpt": excerpt,
                "content": content,
                "tags": tags,
                "status": status,
                "featured": featured,
            },
        )
    if st.button("Delete post", key=f"delete_post_{post.id}"):
        _run_admin_action(_delete_blog_post, post.id)


def _render_wealth_entries() -> None:
    """List snapshots of a trailing period and edit or delete one."""
    category = st.selectbox(
        "Show category",
        ["All", *WEALTH_CATEGORIES],
        key="admin_wealth_category",
    )
    period = st.selectbox(
        "Period",
        ["all", *WEALTH_PERIOD_DAYS],
        format_func=PERIOD_LABELS.get,
        key="admin_wealth_period",
    )
    entries = _recent_wealth_entries(
        None if category == "All" else category,
        period,
        now=datetime.now(),
    )
    if not entries:
        st.info("No snapshots in this period.")
        return
    st.dataframe(
        [
            {
                "Date": _format_date(entry.date),
                "Category": entry.category,
                "Net worth": format_currency(
                    parse_decimal_or_default(entry.net_worth)
                ),
                "Savings rate": format_percent(
                    parse_decimal_or_default(entry.savings_rate)
                ),
            }
            for entry in entries
        ],
        width="stretch",
        hide_index=True,
    )

    labels = {
        entry.id: f"{_format_date(entry.date)} {entry.category}"
        for entry in entries
    }
    entry_id = st.selectbox(
        "Edit snapshot",
        list(labels),
        format_func=labels.get,
        key="admin_wealth_entry",
    )
    entry = next(entry for entry in entries if entry.id == entry_id)
    with st.form(f"wealth_edit_{entry.id}"):
        amounts = {
            name: st.number_input(
                label,
                value=float(parse_decimal_or_default(getattr(entry, name))),
                step=100.0,
                key=f"{name}_{entry.id}",
            )
            for name, label in (
                ("net_worth", "Net worth"),
                ("investments", "Investments"),
                ("cash", "Cash"),
                ("liabilities", "Liabilities"),
                ("fire_target", "FIRE target"),
            )
        }
        savings_rate = st.number_input(
            "Savings rate (%)",
            min_value=-100.0,
            max_value=100.0,
            value=min(
                max(float(parse_decimal_or_default(entry.savings_rate)), -100.0),
                100.0,
            ),
            key=f"savings_rate_{entry.id}",
        )
        saved = st.form_submit_button("Update snapshot")
    if saved:
        _run_admin_action(
            partial(_update_wealth_entry, entry.id),
            {
                "savings_rate": str(savings_rate),
                **{name: str(value) for name, value in amounts.items()},
            },
        )
    if st.button("Delete snapshot", key=f"delete_entry_{entry.id}"):
        _run_admin_action(_delete_wealth_entry, entry.id)


def _render_inbox() -> None:
    messages = _fetch_contact_messages()
    st.caption(f"{len(messages)} messages")
    data = [
        {
            "Received": f"{message.submitted_at:%Y-%m-%d %H:%M}"
            if message.submitted_at
            else "",
            "From": f"{message.name} <{message.email}>",
            "Subject": message.subject,
            "Message": message.message,
        }
        for message in messages
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_admin(settings: DashboardSettings) -> None:
    """Render the password-gated admin page."""
    session = get_admin_session(st.session_state)
    if not settings.admin_password:
        st.warning("Set ADMIN_PASSWORD to enable the admin page.")
        return
    if not session.authenticated:
        password = st.text_input("Admin password", type="password")
        if st.button("Log in"):
            if session.login(password, settings.admin_password):
                st.rerun()
            st.error("Wrong password.")
        return

    if st.sidebar.button("Log out"):
        session.logout()
        st.rerun()

    wealth_tab, goals_tab, posts_tab, inbox_tab = st.tabs(
        ["Wealth", "Goals", "Posts", "Inbox"]
    )
    with wealth_tab:
        _render_wealth_form()
        _render_wealth_entries()
    with goals_tab:
        _render_goal_form()
        _render_goal_editor()
    with posts_tab:
        _render_post_form()
        _render_post_editor()
    with inbox_tab:
        _render_inbox()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="PathTwo", layout="wide")
    st.title("PathTwo")

    settings = _load_settings()
    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"streamlit page={page}")

    if page in ("Dashboard", "Goals"):
        category = st.sidebar.selectbox(
            "Category",
            WEALTH_CATEGORIES,
            index=WEALTH_CATEGORIES.index(DEFAULT_WEALTH_CATEGORY),
        )
        if page == "Dashboard":
            _render_dashboard(category, settings)
        else:
            _render_goals(category)
    elif page == "Blog":
        _render_blog()
    else:
        _render_admin(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
