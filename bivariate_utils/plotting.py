"""
Bivariate Plotting Utilities
Correlation heatmap using Plotly
"""

import plotly.graph_objects as go

from color_utils import get_unified_color_schemes
from .statistics import CorrelationMatrix


def create_correlation_heatmap(
    matrix: CorrelationMatrix,
    title: str = "Correlation Matrix of Numeric Columns",
    height: int = 600,
    show_values: bool = True
) -> go.Figure:
    """
    Create an interactive correlation heatmap

    Parameters
    ----------
    matrix : CorrelationMatrix
        Output of ``correlation_matrix``
    title : str
        Plot title
    height : int
        Figure height in pixels
    show_values : bool
        Write r in every cell (default True)

    Returns
    -------
    go.Figure
        Plotly figure object
    """
    color_scheme = get_unified_color_schemes()

    # Prepare annotations
    annotations = []
    if show_values:
        for i in range(len(matrix.columns)):
            for j in range(len(matrix.columns)):
                corr_val = float(matrix.values[i, j])
                annotations.append(
                    dict(
                        x=matrix.columns[j],
                        y=matrix.columns[i],
                        text=f"{corr_val:.2f}",
                        showarrow=False,
                        # Reversed Blues: strong positive cells are light
                        font=dict(size=10, color='white' if corr_val < 0 else 'black')
                    )
                )

    # Create heatmap
    fig = go.Figure(data=go.Heatmap(
        z=matrix.values,
        x=matrix.columns,
        y=matrix.columns,
        colorscale=color_scheme['heatmap_colorscale'],
        reversescale=True,
        zmin=-1,
        zmax=1,
        colorbar=dict(title="Correlation"),
        hovertemplate='%{y} vs %{x}<br>Correlation: %{z:.3f}<extra></extra>'
    ))

    fig.update_layout(
        title=title,
        annotations=annotations,
        height=height,
        font=dict(family=color_scheme['font_family']),
        xaxis=dict(automargin=True),
        yaxis=dict(automargin=True),
        plot_bgcolor=color_scheme['background'],
        paper_bgcolor=color_scheme['paper']
    )

    return fig
