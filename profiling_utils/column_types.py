"""
Column Type Classification
==========================

Labels every field of a dataset as numeric, date-like or categorical.

Provides:
- Numeric coercion of text cells (decimal grammar, finite values only)
- Column classification: ``classify(dataset) -> (headers, numeric, dates)``
- Per-cell date detection and display formatting for the preview table

Notes
-----
Date-likeness is a property of a single cell. ``is_date_like`` is stateless
and the preview table calls it for every cell it draws; ``classify`` reports
a field as date-like only when every cell passes the same test, without
caching anything at the column level.
"""

import logging
import math
import numbers
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


_DECIMAL_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')
_ISO_DATE_PREFIX_RE = re.compile(r'^\d{4}-\d{2}-\d{2}')


@dataclass(frozen=True)
class ColumnProfile:
    """Derived type information for one field."""
    name: str
    is_numeric: bool
    is_date_like: bool

    @property
    def is_categorical(self) -> bool:
        return not self.is_numeric


# ──────────────────────────────────────────────
#  VALUE LEVEL
# ──────────────────────────────────────────────

def is_missing(value: Any) -> bool:
    """True for ``None``, float NaN and ``NaT``."""
    if value is None or value is pd.NaT:
        return True
    return isinstance(value, float) and math.isnan(value)


def is_numeric_value(value: Any) -> bool:
    """True iff ``value`` is a finite real number (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def coerce_value(value: Any) -> Any:
    """
    Coerce a text cell to a float when it is a finite decimal literal.

    Anything that is not text is returned unchanged, so coercing twice gives
    the same result as coercing once.

    Parameters
    ----------
    value : any
        Raw cell value

    Returns
    -------
    float or original value
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not _DECIMAL_RE.match(text):
        return value
    parsed = float(text)
    if not math.isfinite(parsed):
        return value
    return parsed


def coerce_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new record with ``coerce_value`` applied to every cell."""
    return {key: coerce_value(val) for key, val in record.items()}


def is_date_like(value: Any) -> bool:
    """
    Per-cell date test used at display time.

    A cell is date-like when it is text starting with ``YYYY-MM-DD`` and the
    text parses as a calendar date.
    """
    if not isinstance(value, str) or not _ISO_DATE_PREFIX_RE.match(value):
        return False
    return _parse_date(value) is not None


def format_cell(value: Any) -> str:
    """
    Render one cell for the preview table.

    Date-like text and date/datetime values (Excel date cells arrive as
    ``pd.Timestamp``) are shown as dd/mm/yyyy.
    """
    if is_missing(value):
        return ""
    if isinstance(value, date):
        return value.strftime('%d/%m/%Y')
    if is_date_like(value):
        return _parse_date(value).strftime('%d/%m/%Y')
    return str(value)


# ──────────────────────────────────────────────
#  COLUMN LEVEL
# ──────────────────────────────────────────────

def get_headers(records: Sequence[Mapping[str, Any]]) -> List[str]:
    """Field names of the first record, in insertion order."""
    if not records:
        return []
    return list(records[0].keys())


def is_numeric_field(records: Sequence[Mapping[str, Any]], field: str) -> bool:
    """Every record holds a finite number for ``field`` (missing fails)."""
    return all(is_numeric_value(row.get(field)) for row in records)


def is_date_field(records: Sequence[Mapping[str, Any]], field: str) -> bool:
    """Every cell of ``field`` passes ``is_date_like``."""
    return all(is_date_like(row.get(field)) for row in records)


def classify(dataset) -> Tuple[List[str], List[str], List[str]]:
    """
    Classify the fields of a dataset.

    Parameters
    ----------
    dataset : Dataset or sequence of dict
        Records whose values have already been coerced

    Returns
    -------
    (headers, numeric_fields, date_fields) : tuple of lists
        Both field lists keep header order.
    """
    records = _records_of(dataset)
    headers = get_headers(records)
    numeric_fields = [h for h in headers if is_numeric_field(records, h)]
    date_fields = [h for h in headers if is_date_field(records, h)]

    logger.debug(
        "Classified %d fields: %d numeric, %d date-like",
        len(headers), len(numeric_fields), len(date_fields)
    )
    return headers, numeric_fields, date_fields


def profile_columns(dataset) -> Dict[str, ColumnProfile]:
    """Build a fresh ``ColumnProfile`` per header."""
    headers, numeric_fields, date_fields = classify(dataset)
    numeric, dates = set(numeric_fields), set(date_fields)
    return {
        h: ColumnProfile(name=h, is_numeric=h in numeric, is_date_like=h in dates)
        for h in headers
    }


# ──────────────────────────────────────────────
#  HELPERS
# ──────────────────────────────────────────────

def _records_of(dataset) -> Sequence[Mapping[str, Any]]:
    return getattr(dataset, 'records', dataset)


def _parse_date(text: str):
    try:
        parsed = pd.to_datetime(text, errors='coerce')
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return parsed


def iter_column(records: Iterable[Mapping[str, Any]], field: str) -> Iterable[Any]:
    """Values of ``field`` in row order; absent keys yield ``None``."""
    for row in records:
        yield row.get(field)
