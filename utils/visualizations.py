"""Visualization utilities for the investment calculator."""

import plotly.graph_objects as go

from config.default_params import SETUP_COST_LABELS


def create_setup_cost_chart(components):
    """Create setup cost breakdown pie chart from setup_cost_components()."""
    labels = [SETUP_COST_LABELS[key] for key, value in components.items() if value > 0]
    values = [value for value in components.values() if value > 0]
    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=labels,
        values=values,
        hole=0.45,
        sort=False,
        name='Setup Cost'
    ))
    fig.update_layout(
        title='Setup Cost Breakdown',
        height=360,
        showlegend=True
    )
    return fig


def create_daily_economics_chart(revenue, metrics):
    """Create existing store daily economics bar chart."""
    names = ['Revenue', 'Gross Profit', 'Fixed Cost', 'Net Profit']
    values = [
        revenue,
        metrics.gross_profit_per_day,
        metrics.fixed_cost_per_day,
        metrics.net_profit_per_day,
    ]
    net_color = 'seagreen' if metrics.net_profit_per_day >= 0 else 'crimson'
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names,
        y=values,
        marker_color=['steelblue', 'mediumseagreen', 'darkorange', net_color],
        text=[f"{v:,.2f}" for v in values],
        textposition='outside',
        name='Daily'
    ))
    fig.add_hline(y=metrics.break_even_revenue_per_day, line_dash="dash", line_color="gray",
                  annotation_text="Break-even revenue")
    fig.add_hline(y=0, line_color="black", line_width=1)
    fig.update_layout(
        title='Daily Store Economics',
        xaxis_title='',
        yaxis_title='Amount per day',
        height=360
    )
    return fig
