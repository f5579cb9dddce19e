"""Category flow Sankey presentation logic for the Streamlit UI.

This module contains pure, testable transformations from the category
statistics of a period to a Sankey model and Plotly figure.

The Sankey layout is fixed to three columns:
    Income categories -> Budget -> Expense categories
with optional nodes for the period balance:
    - ``Savings`` when the balance is positive,
    - ``Deficit`` (optional) when the balance is negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal
from typing import TYPE_CHECKING

from finance_tracker.domain.models import (
    CategoryStat,
    PeriodSummary,
    TransactionDirection,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


LEFT_PREFIX = "L:"
MIDDLE_PREFIX = "M:"
RIGHT_PREFIX = "R:"

MIDDLE_LABEL = "Budget"
SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"
OTHER_LABEL = "Other"

MIDDLE_KEY = f"{MIDDLE_PREFIX}BUDGET"
SAVINGS_KEY = f"{RIGHT_PREFIX}SAVINGS"
DEFICIT_KEY = f"{LEFT_PREFIX}DEFICIT"


@dataclass(frozen=True)
class SankeyOptions:
    """Rendering options for the category Sankey.

    Attributes:
        max_categories_per_side: Categories kept per side before the rest
            are grouped into "Other".
        allow_negative_diff: If true, show a "Deficit" node for negative
            balances and link it into the middle node.
    """

    max_categories_per_side: int = 8
    allow_negative_diff: bool = False


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Model used by the UI to render a Sankey with stable indices."""

    node_labels: list[str]
    node_keys: list[str]
    links: list[SankeyLink]
    side_by_key: dict[str, Literal["L", "M", "R"]]


def group_side(
    stats: list[CategoryStat],
    direction: TransactionDirection,
    max_categories: int,
) -> list[tuple[str, Decimal]]:
    """Return (label, amount) pairs for one side, largest first.

    Args:
        stats: Category statistics of the period.
        direction: Direction kept on this side.
        max_categories: Entries kept before grouping the rest into "Other".

    Returns:
        List of labels with their amounts, zero amounts dropped.
    """
    items = sorted(
        (
            stat
            for stat in stats
            if stat.direction == direction and stat.total_amount > 0
        ),
        key=lambda stat: stat.total_amount,
        reverse=True,
    )
    grouped = [
        (stat.category_name, stat.total_amount)
        for stat in items[:max_categories]
    ]
    other_amount = sum(
        (stat.total_amount for stat in items[max_categories:]),
        Decimal("0"),
    )
    if other_amount > 0:
        grouped.append((OTHER_LABEL, other_amount))
    return grouped


def _add_node(
    *,
    node_keys: list[str],
    node_labels: list[str],
    side_by_key: dict[str, Literal["L", "M", "R"]],
    key: str,
    label: str,
    side: Literal["L", "M", "R"],
) -> int:
    if key in side_by_key:
        return node_keys.index(key)
    node_keys.append(key)
    node_labels.append(label)
    side_by_key[key] = side
    return len(node_keys) - 1


def build_sankey_model(
    stats: list[CategoryStat],
    summary: PeriodSummary,
    options: SankeyOptions | None = None,
) -> SankeyModel:
    """Build a stable Sankey model from category statistics.

    Args:
        stats: Category statistics of the period.
        summary: Summary of the same period, used for the balance node.
        options: Optional rendering options.

    Returns:
        SankeyModel: Nodes and links ready for rendering.
    """
    resolved = options or SankeyOptions()
    incoming = group_side(
        stats,
        TransactionDirection.INCOME,
        resolved.max_categories_per_side,
    )
    outgoing = group_side(
        stats,
        TransactionDirection.EXPENSE,
        resolved.max_categories_per_side,
    )

    node_labels: list[str] = []
    node_keys: list[str] = []
    side_by_key: dict[str, Literal["L", "M", "R"]] = {}
    links: list[SankeyLink] = []

    middle_index = _add_node(
        node_keys=node_keys,
        node_labels=node_labels,
        side_by_key=side_by_key,
        key=MIDDLE_KEY,
        label=MIDDLE_LABEL,
        side="M",
    )
    for label, amount in incoming:
        source = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=f"{LEFT_PREFIX}{label}",
            label=label,
            side="L",
        )
        links.append(
            SankeyLink(source=source, target=middle_index, value=amount)
        )
    for label, amount in outgoing:
        target = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=f"{RIGHT_PREFIX}{label}",
            label=label,
            side="R",
        )
        links.append(
            SankeyLink(source=middle_index, target=target, value=amount)
        )

    balance = summary.balance
    if balance > 0:
        savings_index = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=SAVINGS_KEY,
            label=SAVINGS_LABEL,
            side="R",
        )
        links.append(
            SankeyLink(
                source=middle_index, target=savings_index, value=balance
            )
        )
    if balance < 0 and resolved.allow_negative_diff:
        deficit_index = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            side_by_key=side_by_key,
            key=DEFICIT_KEY,
            label=DEFICIT_LABEL,
            side="L",
        )
        links.append(
            SankeyLink(
                source=deficit_index,
                target=middle_index,
                value=abs(balance),
            )
        )

    return SankeyModel(
        node_labels=node_labels,
        node_keys=node_keys,
        links=links,
        side_by_key=side_by_key,
    )


def build_plotly_figure(model: SankeyModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a Sankey model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    left_count = sum(
        1 for key in model.node_keys if model.side_by_key.get(key) == "L"
    )
    right_count = sum(
        1 for key in model.node_keys if model.side_by_key.get(key) == "R"
    )

    node_x: list[float] = []
    node_y: list[float] = []
    left_seen = 0
    right_seen = 0
    for key in model.node_keys:
        side = model.side_by_key.get(key, "M")
        if side == "L":
            node_x.append(0.02)
            node_y.append((left_seen + 1) / (left_count + 1))
            left_seen += 1
        elif side == "R":
            node_x.append(0.98)
            node_y.append((right_seen + 1) / (right_count + 1))
            right_seen += 1
        else:
            node_x.append(0.5)
            node_y.append(0.5)

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    x=node_x,
                    y=node_y,
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
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=520,
    )
    return fig


__all__ = [
    "SankeyOptions",
    "SankeyLink",
    "SankeyModel",
    "group_side",
    "build_sankey_model",
    "build_plotly_figure",
]
