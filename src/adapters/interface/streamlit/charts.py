"""Chart builders for the Streamlit dashboard.

Data preparation is kept apart from chart construction so it can be tested
without rendering: ``prepare_*`` helpers return plain lists of dicts and
``build_*`` helpers turn them into Altair charts or a Plotly figure.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

import altair as alt

from src.domain.models import AllocationPoint, CashFlow, TrendPoint
from src.utils.date_utils import coerce_datetime

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


ASSET_PALETTE = (
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
)

DEBT_PALETTE = (
    "#e76f51",
    "#f4a261",
    "#6c8ead",
    "#a0c4ff",
)

TREND_SERIES = (
    ("net_worth", "Net Worth"),
    ("investments", "Investments"),
    ("cash", "Cash"),
    ("liabilities", "Liabilities"),
)

INCOME_LABEL = "Income"
EXPENSES_LABEL = "Expenses"
SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"


def format_currency(value: Decimal) -> str:
    """Format an amount in dollars for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent(value: Decimal) -> str:
    """Format a percentage with one decimal."""
    return f"{value:.1f}%"


def prepare_trend_data(
    trend: Sequence[TrendPoint],
) -> list[dict[str, str | float]]:
    """Flatten trend points into one row per date and series.

    Args:
        trend: Chronologically ordered trend points.

    Returns:
        Rows with ``date``, ``series`` and ``amount`` keys; points without
        a readable date are skipped.
    """
    rows: list[dict[str, str | float]] = []
    for point in trend:
        moment = coerce_datetime(point.date)
        if moment is None:
            continue
        for attribute, label in TREND_SERIES:
            amount = getattr(point, attribute)
            rows.append(
                {
                    "date": moment.date().isoformat(),
                    "series": label,
                    "amount": float(amount),
                    "amount_label": format_currency(amount),
                }
            )
    return rows


def build_trend_chart(
    data: list[dict[str, str | float]],
    height: int = 320,
) -> alt.Chart:
    """Build the net worth trend line chart."""
    hover = alt.selection_point(
        name="trend_hover",
        fields=["series"],
        on="pointerover",
        bind="legend",
    )
    return (
        alt.Chart(alt.Data(values=data))
        .mark_line(point=True, strokeWidth=2)
        .encode(
            x=alt.X("date:T", title=None),
            y=alt.Y("amount:Q", title=None, axis=alt.Axis(format="$,.0f")),
            color=alt.Color(
                "series:N",
                sort=[label for _, label in TREND_SERIES],
                legend=alt.Legend(orient="bottom", title=None),
            ),
            opacity=alt.condition(hover, alt.value(1.0), alt.value(0.3)),
            tooltip=[
                alt.Tooltip("date:T"),
                alt.Tooltip("series:N"),
                alt.Tooltip("amount_label:N", title="amount"),
            ],
        )
        .add_params(hover)
        .properties(height=height)
    )


def prepare_allocation_data(
    points: Sequence[AllocationPoint],
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows from allocation points.

    Points are sorted by value, largest first. Percentages come from the
    aggregation service and are not recomputed here.
    """
    ordered = sorted(points, key=lambda point: point.value, reverse=True)
    return [
        {
            "category": point.label,
            "amount": float(point.value),
            "amount_label": format_currency(point.value),
            "share_label": format_percent(point.percentage),
        }
        for point in ordered
    ]


def build_donut_chart(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
    palette: Sequence[str] = ASSET_PALETTE,
    legend_columns: int = 2,
) -> alt.LayerChart:
    """Build a donut chart with a hover label in the middle.

    Args:
        data: Rows from ``prepare_allocation_data``.
        chart_size: Width and height of the chart canvas.
        palette: Colors assigned to the categories.
        legend_columns: Column count of the legend.

    Returns:
        alt.LayerChart: Arc layer plus the hover text layer.
    """
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="pointerover",
        clear="pointerout",
        empty=False,
    )
    legend = alt.Legend(
        orient="bottom",
        title=None,
        direction="horizontal",
        columns=legend_columns,
        labelLimit=180,
    )
    base = (
        alt.Chart(alt.Data(values=data))
        .mark_arc(
            innerRadius=chart_size * 0.4,
            cornerRadius=8,
            padAngle=0.02,
        )
        .encode(
            theta=alt.Theta("amount:Q"),
            color=alt.Color(
                "category:N",
                scale=alt.Scale(range=list(palette)),
                legend=legend,
            ),
            opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
            order=alt.Order("amount:Q", sort="descending"),
            tooltip=[
                alt.Tooltip("category:N"),
                alt.Tooltip("amount_label:N", title="amount"),
                alt.Tooltip("share_label:N", title="share"),
            ],
        )
    )
    hover_text = (
        alt.Chart(alt.Data(values=data))
        .transform_filter(hover)
        .mark_text(
            align="center",
            baseline="middle",
            fontSize=16,
            fontWeight="bold",
        )
        .encode(text="share_label:N")
    )
    return (
        alt.layer(base, hover_text)
        .add_params(hover)
        .properties(width=chart_size, height=chart_size)
        .configure_view(stroke=None)
    )


@dataclass(frozen=True)
class CashFlowLink:
    """Sankey edge between two cash flow nodes."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class CashFlowModel:
    """Node labels and links of the cash flow Sankey."""

    node_labels: list[str]
    links: list[CashFlowLink]


def build_cash_flow_model(cash_flow: CashFlow) -> CashFlowModel:
    """Lay out a month of income, expenses and savings as a Sankey.

    Income feeds expenses and, when income exceeds expenses, savings. When
    expenses exceed income, a deficit node covers the gap.
    """
    labels = [INCOME_LABEL, EXPENSES_LABEL]
    links: list[CashFlowLink] = []
    covered = min(cash_flow.income, cash_flow.expenses)
    if covered > 0:
        links.append(CashFlowLink(source=0, target=1, value=covered))

    surplus = cash_flow.net
    if surplus > 0:
        labels.append(SAVINGS_LABEL)
        links.append(CashFlowLink(source=0, target=2, value=surplus))
    elif surplus < 0:
        labels.append(DEFICIT_LABEL)
        links.append(CashFlowLink(source=2, target=1, value=-surplus))
    return CashFlowModel(node_labels=labels, links=links)


def build_cash_flow_figure(model: CashFlowModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a cash flow model."""
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=12,
                    thickness=14,
                    label=model.node_labels,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(margin=dict(l=8, r=8, t=8, b=8), height=320)
    return fig


__all__ = [
    "ASSET_PALETTE",
    "DEBT_PALETTE",
    "format_currency",
    "format_percent",
    "prepare_trend_data",
    "build_trend_chart",
    "prepare_allocation_data",
    "build_donut_chart",
    "CashFlowLink",
    "CashFlowModel",
    "build_cash_flow_model",
    "build_cash_flow_figure",
]
