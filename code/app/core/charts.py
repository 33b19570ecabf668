from typing import Optional, Tuple

import plotly.graph_objects as go

from .labels import text

LIQUIDITY_COLORS = ("#22c55e", "#ef4444")
LEVERAGE_COLORS = ("#f59e0b", "#3b82f6")
LEGEND_COLOR = "#cbd5e1"

_CHART_LAYOUT = dict(
    showlegend=True,
    legend=dict(orientation="h", y=-0.1, font=dict(color=LEGEND_COLOR)),
    margin=dict(l=10, r=10, t=30, b=10),
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
)


def _doughnut(labels: Tuple[str, str], values: Tuple[float, float], colors: Tuple[str, str], title: str) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=list(labels),
            values=list(values),
            hole=0.5,
            sort=False,
            marker=dict(colors=list(colors)),
            textinfo="percent",
        )
    )
    fig.update_layout(title=dict(text=title), **_CHART_LAYOUT)
    return fig


def liquidity_chart(series: Tuple[float, float], locale: Optional[str] = None) -> go.Figure:
    return _doughnut(
        (text("current_assets", locale), text("current_liabilities", locale)),
        series,
        LIQUIDITY_COLORS,
        text("current_ratio", locale),
    )


def leverage_chart(series: Tuple[float, float], locale: Optional[str] = None) -> go.Figure:
    return _doughnut(
        (text("total_debt", locale), text("equity", locale)),
        series,
        LEVERAGE_COLORS,
        text("debt_ratio", locale),
    )
