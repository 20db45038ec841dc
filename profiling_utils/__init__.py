"""
Column profiling utilities
Numeric coercion, column classification and per-cell date detection
"""

from .column_types import (
    ColumnProfile,
    classify,
    coerce_record,
    coerce_value,
    format_cell,
    get_headers,
    is_date_like,
    is_missing,
    is_numeric_value,
    iter_column,
    profile_columns,
)

__all__ = [
    'ColumnProfile',
    'classify',
    'coerce_record',
    'coerce_value',
    'format_cell',
    'get_headers',
    'is_date_like',
    'is_missing',
    'is_numeric_value',
    'iter_column',
    'profile_columns',
]
