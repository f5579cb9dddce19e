"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from finance_tracker.adapters.interface.streamlit.sankey_categories import (
    build_plotly_figure,
    build_sankey_model,
)
from finance_tracker.domain.exceptions import FinanceTrackerError
from finance_tracker.domain.models import (
    CategoryStat,
    ComparisonResult,
    FullDashboard,
    PeriodDashboard,
    Projection,
    RecentTransaction,
    TrendPoint,
)
from finance_tracker.domain.services.periods import current_month_bounds
from finance_tracker.infrastructure.container import build_reporting_services
from finance_tracker.infrastructure.logging.logger import get_usage_logger
from finance_tracker.infrastructure.settings import FinanceSettings


def _fetch_dashboard() -> FullDashboard:
    """Fetch the dashboard anchored on today."""
    services = build_reporting_services()
    return services.dashboard.execute()


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard() -> FullDashboard:
    """Cached wrapper around _fetch_dashboard for Streamlit sessions."""
    return _fetch_dashboard()


def _fetch_period_dashboard(start_date: date, end_date: date) -> PeriodDashboard:
    """Fetch the dashboard of an arbitrary period."""
    services = build_reporting_services()
    return services.dashboard.execute_for_period(start_date, end_date)


@st.cache_data(show_spinner=False, ttl=60)
def _load_period_dashboard(start_date: date, end_date: date) -> PeriodDashboard:
    """Cached wrapper around _fetch_period_dashboard."""
    return _fetch_period_dashboard(start_date, end_date)


def _fetch_trend_insights(
    years: int,
) -> tuple[list[TrendPoint], ComparisonResult, ComparisonResult, Projection]:
    """Fetch the yearly trend, both comparisons and the projection."""
    services = build_reporting_services()
    return (
        services.trends.yearly(years),
        services.comparison.month_over_month(),
        services.comparison.year_over_year(),
        services.projection.execute(),
    )


@st.cache_data(show_spinner=False, ttl=60)
def _load_trend_insights(
    years: int,
) -> tuple[list[TrendPoint], ComparisonResult, ComparisonResult, Projection]:
    """Cached wrapper around _fetch_trend_insights."""
    return _fetch_trend_insights(years)


def _fetch_currency_symbol() -> str:
    """Read the configured currency symbol."""
    return FinanceSettings.from_env().currency_symbol


@st.cache_data(show_spinner=False, ttl=60)
def _load_currency_symbol() -> str:
    """Cached wrapper around _fetch_currency_symbol."""
    return _fetch_currency_symbol()


def _format_currency(value: Decimal, symbol: str = "$") -> str:
    """Format currency values for display."""
    return f"{symbol} {value:,.2f}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(delta: Decimal, percent: Decimal) -> str:
    """Format a variance amount with its percentage."""
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _trend_chart_data(points: Sequence[TrendPoint]) -> list[dict]:
    """Flatten trend points into long-form rows for Altair."""
    data: list[dict] = []
    for order, point in enumerate(points):
        for series, amount in (
            ("Income", point.summary.total_income),
            ("Expenses", point.summary.total_expenses),
            ("Balance", point.summary.balance),
        ):
            data.append(
                {
                    "period": point.label,
                    "order": order,
                    "series": series,
                    "amount": float(amount),
                }
            )
    return data


def _recent_rows(
    records: Sequence[RecentTransaction], symbol: str = "$"
) -> list[dict]:
    return [
        {
            "When": record.relative_date,
            "Description": record.description,
            "Category": record.category_name,
            "Type": record.direction.value.title(),
            "Amount": _format_currency(record.amount, symbol),
        }
        for record in records
    ]


def _category_rows(
    stats: Sequence[CategoryStat], symbol: str = "$"
) -> list[dict]:
    return [
        {
            "Category": stat.category_name,
            "Type": stat.direction.value.title(),
            "Transactions": stat.transaction_count,
            "Total": _format_currency(stat.total_amount, symbol),
            "Share": f"{stat.percentage:.2f}%",
        }
        for stat in stats
    ]


def _prepare_donut_chart_data(
    stats: Sequence[CategoryStat],
    symbol: str = "$",
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows from category statistics."""
    total = sum((stat.total_amount for stat in stats), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for stat in stats:
        share = (
            (stat.total_amount / total) * Decimal("100")
            if total
            else Decimal("0")
        )
        data.append(
            {
                "category": stat.category_name,
                "amount": float(stat.total_amount),
                "amount_label": _format_currency(stat.total_amount, symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_trend_chart(points: Sequence[TrendPoint], title: str) -> None:
    """Render income, expenses and balance lines for a trend."""
    st.subheader(title)
    if not points:
        st.info("No trend data available.")
        return
    chart = alt.Chart(alt.Data(values=_trend_chart_data(points))).mark_line(
        point=True
    ).encode(
        x=alt.X(
            "period:N",
            sort=alt.SortField("order"),
            title=None,
        ),
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Income", "Expenses", "Balance"],
                range=["#2e7d32", "#e76f51", "#1b9aaa"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("period:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, use_container_width=True)


def _render_category_donut(
    stats: Sequence[CategoryStat], title: str, symbol: str
) -> None:
    """Render a donut chart of category totals."""
    st.subheader(title)
    if not stats:
        st.info("No categories with transactions in this period.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_donut_chart_data(stats, symbol))
    ).mark_arc(innerRadius=80, cornerRadius=6, padAngle=0.02).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    st.altair_chart(chart, use_container_width=True)


def _render_dashboard_page(symbol: str) -> None:
    dashboard = _load_dashboard()
    current = dashboard.current_month
    previous = dashboard.last_month

    income_col, expenses_col, balance_col = st.columns(3)
    income_col.metric(
        "Income (month)",
        _format_currency(current.total_income, symbol),
        _format_delta(current.total_income - previous.total_income),
    )
    expenses_col.metric(
        "Expenses (month)",
        _format_currency(current.total_expenses, symbol),
        _format_delta(current.total_expenses - previous.total_expenses),
        delta_color="inverse",
    )
    balance_col.metric(
        "Balance (month)",
        _format_currency(current.balance, symbol),
        _format_delta(current.balance - previous.balance),
    )
    year_balance = _format_currency(dashboard.current_year.balance, symbol)
    st.caption(
        f"Year to date: {year_balance} "
        f"balance over {dashboard.current_year.transaction_count} "
        f"transactions"
    )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_trend_chart(dashboard.monthly_trend, "Last 6 months")
    with chart_right:
        _render_category_donut(
            dashboard.top_categories, "Top expense categories", symbol
        )

    st.subheader("Recent transactions")
    st.dataframe(
        _recent_rows(dashboard.recent_transactions, symbol),
        use_container_width=True,
        hide_index=True,
    )


def _render_period_page(today: date, symbol: str) -> None:
    default_start, _ = current_month_bounds(today)
    start_date = st.sidebar.date_input("Start date", value=default_start)
    end_date = st.sidebar.date_input("End date", value=today)
    try:
        dashboard = _load_period_dashboard(start_date, end_date)
    except FinanceTrackerError as exc:
        st.warning(str(exc))
        return

    period = dashboard.period
    income_col, expenses_col, balance_col = st.columns(3)
    income_col.metric("Income", _format_currency(period.total_income, symbol))
    expenses_col.metric(
        "Expenses", _format_currency(period.total_expenses, symbol)
    )
    balance_col.metric("Balance", _format_currency(period.balance, symbol))

    st.subheader("Category flow")
    if dashboard.category_stats:
        model = build_sankey_model(dashboard.category_stats, period)
        st.plotly_chart(build_plotly_figure(model), use_container_width=True)
    else:
        st.info("No transactions in this period.")

    st.dataframe(
        _category_rows(dashboard.category_stats, symbol),
        use_container_width=True,
        hide_index=True,
    )
    st.subheader("Recent transactions")
    st.dataframe(
        _recent_rows(dashboard.recent_transactions, symbol),
        use_container_width=True,
        hide_index=True,
    )


def _render_comparison(
    column, title: str, result: ComparisonResult, symbol: str
) -> None:
    column.markdown(f"**{title}** ({result.description})")
    column.metric(
        "Income",
        _format_currency(result.current.total_income, symbol),
        _format_delta_with_percent(
            result.income_variance_amount,
            result.income_variance_percentage,
        ),
    )
    column.metric(
        "Expenses",
        _format_currency(result.current.total_expenses, symbol),
        _format_delta_with_percent(
            result.expense_variance_amount,
            result.expense_variance_percentage,
        ),
        delta_color="inverse",
    )
    column.metric(
        "Balance",
        _format_currency(result.current.balance, symbol),
        _format_delta_with_percent(
            result.balance_variance_amount,
            result.balance_variance_percentage,
        ),
    )


def _render_trends_page(symbol: str) -> None:
    years = st.sidebar.slider("Years", min_value=1, max_value=10, value=3)
    yearly, month_over_month, year_over_year, projection = (
        _load_trend_insights(years)
    )
    _render_trend_chart(yearly, "Yearly trend")

    left, right = st.columns(2)
    _render_comparison(left, "Month over month", month_over_month, symbol)
    _render_comparison(right, "Year over year", year_over_year, symbol)

    st.subheader(f"Projection for {projection.projection_date:%B %Y}")
    income_col, expenses_col, balance_col = st.columns(3)
    income_col.metric(
        "Income", _format_currency(projection.projected_income, symbol)
    )
    expenses_col.metric(
        "Expenses", _format_currency(projection.projected_expenses, symbol)
    )
    balance_col.metric(
        "Balance", _format_currency(projection.projected_balance, symbol)
    )
    st.caption(
        f"{projection.method}, confidence {projection.confidence_level}%"
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Period", "Trends"])
    get_usage_logger().info(f"Rendering page {page}")
    symbol = _load_currency_symbol()

    if page == "Dashboard":
        _render_dashboard_page(symbol)
    elif page == "Period":
        _render_period_page(date.today(), symbol)
    else:
        _render_trends_page(symbol)


if __name__ == "__main__":  # pragma: no cover
    main()
