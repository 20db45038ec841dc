"""
Chart Plotting Utilities
Turns a SeriesDescriptor into a Plotly figure
"""

from typing import Callable, Dict, List

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from color_utils import get_unified_color_schemes
from eda_utils.eda_plots import empty_figure
from .chart_projection import ChartType, SeriesDescriptor


def _base_style(colors) -> dict:
    return dict(marker=dict(color=colors['point_color']))


def _bar_traces(descriptor: SeriesDescriptor, colors) -> List[BaseTraceType]:
    return [go.Bar(x=s['x'], y=s['y'], name=s.name, **_base_style(colors))
            for s in descriptor.series]


def _line_traces(descriptor: SeriesDescriptor, colors) -> List[BaseTraceType]:
    return [go.Scatter(x=s['x'], y=s['y'], name=s.name, mode='lines+markers',
                       line=dict(color=colors['line_color']), **_base_style(colors))
            for s in descriptor.series]


def _scatter_traces(descriptor: SeriesDescriptor, colors) -> List[BaseTraceType]:
    return [go.Scatter(x=s['x'], y=s['y'], name=s.name, mode='markers', **_base_style(colors))
            for s in descriptor.series]


def _pie_traces(descriptor: SeriesDescriptor, colors) -> List[BaseTraceType]:
    return [go.Pie(labels=s['labels'], values=s['values'], name=s.name,
                   marker=dict(colors=colors['pie_colors']))
            for s in descriptor.series]


def _box_traces(descriptor: SeriesDescriptor, colors) -> List[BaseTraceType]:
    return [go.Box(y=s['y'], name=s.name, **_base_style(colors))
            for s in descriptor.series]


def _histogram_traces(descriptor: SeriesDescriptor, colors) -> List[BaseTraceType]:
    return [go.Histogram(x=s['x'], name=s.name, nbinsx=descriptor.bin_count,
                         **_base_style(colors))
            for s in descriptor.series]


_TRACE_BUILDERS: Dict[ChartType, Callable[[SeriesDescriptor, dict], List[BaseTraceType]]] = {
    ChartType.BAR: _bar_traces,
    ChartType.LINE: _line_traces,
    ChartType.SCATTER: _scatter_traces,
    ChartType.PIE: _pie_traces,
    ChartType.BOX: _box_traces,
    ChartType.HISTOGRAM: _histogram_traces,
}


def create_chart(descriptor: SeriesDescriptor, height: int = 500) -> go.Figure:
    """
    Create the Plotting Studio figure

    Parameters
    ----------
    descriptor : SeriesDescriptor
        Output of ``project``
    height : int
        Figure height in pixels

    Returns
    -------
    go.Figure
        An empty-state figure when the descriptor carries no series
    """
    if descriptor.is_empty:
        return empty_figure("Select the columns required by this chart", height=height)

    colors = get_unified_color_schemes()
    traces = _TRACE_BUILDERS[descriptor.chart_type](descriptor, colors)

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=descriptor.title,
        height=height,
        font=dict(family=colors['font_family']),
        xaxis=dict(title=descriptor.x_field),
        yaxis=dict(title=descriptor.y_field),
        plot_bgcolor=colors['background'],
        paper_bgcolor=colors['paper'],
    )
    fig.update_xaxes(showgrid=True, gridcolor=colors['grid'])
    fig.update_yaxes(showgrid=True, gridcolor=colors['grid'])

    return fig
