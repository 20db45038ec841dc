"""
EDA Plots Module
================

Plotly figures for the Column Analytics and Skewness Check tabs.

Main functions
--------------
plot_column_boxplot(values, column_name)            -> go.Figure
plot_skewness_report(values, column_name, stats)    -> go.Figure

Skewness figure layout
----------------------
  Histogram (max(10, sqrt(n)) bins, counts)
  + normal curve scaled to the histogram
  + Mean / Median / Mode markers above the curve peak
"""

from typing import Any, Optional, Sequence

import plotly.graph_objects as go

from color_utils import get_unified_color_schemes, with_opacity
from profiling_utils import is_missing
from .skewness import SkewnessStats, marker_heights, normal_curve, skewness_stats


# ──────────────────────────────────────────────
#  PUBLIC API
# ──────────────────────────────────────────────

def plot_column_boxplot(
    values: Sequence[Any],
    column_name: str = "Variable",
    height: int = 300,
) -> go.Figure:
    """
    Vertical box plot of one column, every row included.

    Parameters
    ----------
    values : sequence
        Raw column values in row order
    column_name : str
        Trace name and y-axis title
    height : int, default 300

    Returns
    -------
    go.Figure
    """
    colors = get_unified_color_schemes()

    fig = go.Figure(go.Box(
        y=list(values),
        name=column_name,
        marker_color=colors['point_color'],
        boxpoints='outliers',
    ))
    fig.update_layout(
        height=height,
        margin=dict(t=20, b=20, l=40, r=20),
        yaxis=dict(title=column_name),
        template='plotly_white',
        showlegend=False,
    )
    return fig


def plot_skewness_report(
    values: Sequence[Any],
    column_name: str = "Variable",
    stats: Optional[SkewnessStats] = None,
    height: int = 400,
) -> go.Figure:
    """
    Histogram with fitted normal curve and central-tendency markers.

    Parameters
    ----------
    values : sequence
        Column values (Missing entries are dropped)
    column_name : str
        Variable name shown in the title and x-axis
    stats : SkewnessStats, optional
        Pre-computed statistics. If *None*, they are computed here.
    height : int, default 400

    Returns
    -------
    go.Figure
        An empty figure with a notice when the column has no values.
    """
    clean = [v for v in values if not is_missing(v)]
    if stats is None:
        stats = skewness_stats(clean)
    if stats is None:
        return empty_figure("No values to plot", height=height)

    colors = get_unified_color_schemes()
    curve = normal_curve(stats)
    mean_y, median_y, mode_y = marker_heights(curve)

    fig = go.Figure()

    # ── 1. Histogram ─────────────────────────────────────────────
    fig.add_trace(go.Histogram(
        x=clean,
        nbinsx=curve.bin_count,
        name='Data',
        marker=dict(color=with_opacity(colors['point_color'], 0.5)),
        hoverinfo='x+y',
    ))

    # ── 2. Normal curve ──────────────────────────────────────────
    fig.add_trace(go.Scatter(
        x=curve.x,
        y=curve.y,
        mode='lines',
        name='Normal Curve',
        line=dict(color=colors['normal_curve'], width=3),
    ))

    # ── 3. Markers ───────────────────────────────────────────────
    fig.add_trace(_marker_trace(stats.mean, mean_y, 'Mean', colors['mean_marker'], 'circle'))
    fig.add_trace(_marker_trace(stats.median, median_y, 'Median', colors['median_marker'], 'diamond'))

    if stats.modes and not stats.all_unique:
        modes = sorted(stats.modes)
        fig.add_trace(go.Scatter(
            x=modes,
            y=[mode_y] * len(modes),
            mode='markers+text',
            name='Mode',
            marker=dict(color=colors['mode_marker'], size=14, symbol='star'),
            text=['Mode'] * len(modes),
            textposition='top center',
            showlegend=False,
        ))

    fig.update_layout(
        title=f'Distribution & Skewness of "{column_name}"',
        barmode='overlay',
        height=height,
        font=dict(family=colors['font_family']),
        xaxis=dict(title=column_name),
        yaxis=dict(title='Frequency'),
        legend=dict(orientation='h', y=-0.2),
        margin=dict(t=40, l=40, r=20, b=40),
        template='plotly_white',
    )
    return fig


def empty_figure(message: str, height: int = 400) -> go.Figure:
    """Blank figure carrying a centred notice."""
    fig = go.Figure()
    fig.update_layout(
        height=height,
        template='plotly_white',
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        annotations=[dict(
            text=message,
            x=0.5, y=0.5,
            xref='paper', yref='paper',
            showarrow=False,
            font=dict(size=14, color='#6b7280'),
        )],
    )
    return fig


# ──────────────────────────────────────────────
#  PRIVATE HELPERS
# ──────────────────────────────────────────────

def _marker_trace(x, y, label, color, symbol) -> go.Scatter:
    return go.Scatter(
        x=[x],
        y=[y],
        mode='markers+text',
        name=label,
        marker=dict(color=color, size=14, symbol=symbol),
        text=[label],
        textposition='top center',
        showlegend=False,
    )
