"""
Bivariate Analysis Utilities
Pearson correlation matrix and heatmap for the numeric columns of a dataset
"""

from .statistics import (
    CorrelationMatrix,
    CorrelationResult,
    CorrelationStatus,
    correlation_between,
    correlation_matrix,
    get_correlation_summary,
    pearson_correlation
)

from .plotting import (
    create_correlation_heatmap
)

from .heatmap_workspace import (
    render_heatmap_tab
)

__all__ = [
    'CorrelationMatrix',
    'CorrelationResult',
    'CorrelationStatus',
    'correlation_between',
    'correlation_matrix',
    'get_correlation_summary',
    'pearson_correlation',
    'create_correlation_heatmap',
    'render_heatmap_tab'
]
