"""
Plotting Utilities
Chart projection (chart type + columns -> series descriptor) and Plotly rendering
"""

from .chart_projection import (
    CHART_LABELS,
    ChartType,
    Series,
    SeriesDescriptor,
    default_selection,
    project,
    required_fields
)

from .chart_plots import (
    create_chart
)

from .plotting_workspace import (
    render_plotting_tab
)

__all__ = [
    'CHART_LABELS',
    'ChartType',
    'Series',
    'SeriesDescriptor',
    'default_selection',
    'project',
    'required_fields',
    'create_chart',
    'render_plotting_tab'
]
