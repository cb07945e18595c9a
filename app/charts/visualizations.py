"""Visualization components using Plotly for interactive charts."""

import plotly.graph_objects as go
import pandas as pd

from calculators.currency import to_display
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# ========================================
# CHART STYLING CONSTANTS
# ========================================

CHART_HEIGHT = 360

CHART_TITLE_FONT = dict(size=18, family="JetBrains Mono", color="#e6e6e6")
CHART_LEGEND_FONT = dict(color='#E5E7EB', family="Inter")

CHART_HOVER_LABEL = dict(
    bgcolor='rgba(17, 24, 39, 0.95)',
    bordercolor='#4B7DA3',
    font_size=13,
    font_family='JetBrains Mono'
)

COST_COLORS = ['#4B7DA3', '#527a85', '#7a8c9a', '#4ade80']
PROFIT_COLOR = '#4ade80'
LOSS_COLOR = '#f87171'


def _base_layout(fig: go.Figure, title: str) -> go.Figure:
    title_dict = dict(text="") if not title else dict(text=title, x=0, xref="container", font=CHART_TITLE_FONT)
    fig.update_layout(
        title=title_dict,
        height=CHART_HEIGHT,
        margin=dict(t=60 if title else 10, b=30, l=30, r=30),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter", color="#9CA3AF"),
        legend=dict(orientation="h", yanchor="bottom", y=-0.15, xanchor="center", x=0.5,
                    font=dict(**CHART_LEGEND_FONT, size=11), bgcolor='rgba(0,0,0,0)'),
    )
    return fig


def create_cost_breakdown_donut(results, labels, currency, exchange_rate, title: str = "") -> go.Figure:
    """
    Donut of fuel / toll / service cost and net profit (when positive).

    Args:
        results: CalculationResults (PLN)
        labels: Slice labels in the order fuel, toll, service, profit
        currency: Display currency
        exchange_rate: PLN per 1 EUR
    """
    values = [
        results.total_fuel_cost,
        results.total_toll_cost,
        results.total_service_cost,
        max(results.total_net_profit, 0.0),
    ]
    values = [to_display(v, currency, exchange_rate) for v in values]

    if sum(values) <= 0:
        return go.Figure()

    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.60,
        sort=False,
        hovertemplate='<b>%{label}</b><br>%{value:,.2f} ' + str(getattr(currency, 'value', currency)) +
                      '<br>%{percent}<extra></extra>',
        hoverlabel=CHART_HOVER_LABEL,
        textinfo='percent',
        marker=dict(colors=COST_COLORS, line=dict(color='#0e1117', width=2))
    )])

    return _base_layout(fig, title)


def create_profit_history_chart(history_df: pd.DataFrame, title: str = "") -> go.Figure:
    """
    Bar chart of net profit (PLN) per saved trip, oldest on the left.

    Args:
        history_df: Output of calculators.history.trips_to_dataframe
    """
    if history_df.empty:
        return go.Figure()

    df = history_df.iloc[::-1].reset_index(drop=True)
    colors = [PROFIT_COLOR if v >= 0 else LOSS_COLOR for v in df['Net Profit (PLN)']]

    fig = go.Figure(data=[go.Bar(
        x=df['Date'] + ' · ' + df['ID'].str[-4:],
        y=df['Net Profit (PLN)'],
        marker_color=colors,
        customdata=df[['Distance (km)']].to_numpy(),
        hovertemplate='<b>%{x}</b><br>%{y:,.2f} PLN<br>%{customdata[0]:,.0f} km<extra></extra>',
        hoverlabel=CHART_HOVER_LABEL,
    )])

    fig.update_xaxes(type='category', showgrid=False)
    fig.update_yaxes(gridcolor='rgba(90, 122, 143, 0.15)', zerolinecolor='#7a8c9a')

    logger.debug(f"Profit history chart built for {len(df)} trips")
    return _base_layout(fig, title)
