"""
Data handling utility modules for GetInsights
"""

from .data_workspace import (
    AnalysisCache,
    Dataset,
    Page,
    paginate
)

from .data_loaders import (
    DataLoadError,
    load_csv,
    load_excel,
    load_uploaded_file
)

from .data_exporters import (
    export_summaries_to_excel
)

from .logging_config import (
    setup_logging
)

__all__ = [
    # Workspace
    'AnalysisCache',
    'Dataset',
    'Page',
    'paginate',
    # Loaders
    'DataLoadError',
    'load_csv',
    'load_excel',
    'load_uploaded_file',
    # Exporters
    'export_summaries_to_excel',
    # Logging
    'setup_logging'
]
