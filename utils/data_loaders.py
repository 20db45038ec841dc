"""
Data loaders for the GetInsights app
Decodes uploaded CSV and Excel files into an immutable Dataset
"""

import io
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from .data_workspace import Dataset

logger = logging.getLogger(__name__)

CSV_ENCODINGS = ['utf-8', 'latin-1', 'cp1252']


class DataLoadError(ValueError):
    """Raised when an uploaded file cannot be decoded into records."""


def load_csv(uploaded_file) -> pd.DataFrame:
    """
    Load a CSV file, retrying with fallback encodings

    Parameters:
    -----------
    uploaded_file : file-like object
        Uploaded file from Streamlit (or any binary buffer)

    Returns:
    --------
    pd.DataFrame : Decoded table, first row used as header
    """
    content = uploaded_file.read()
    for enc in CSV_ENCODINGS:
        try:
            data = pd.read_csv(io.BytesIO(content), encoding=enc)
            logger.info("CSV decoded with encoding: %s", enc)
            return data
        except UnicodeDecodeError:
            continue
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise DataLoadError(f"Unable to parse CSV: {e}") from e

    raise DataLoadError("Unable to decode file with any encoding")


def load_excel(uploaded_file) -> pd.DataFrame:
    """
    Load the first sheet of an Excel workbook

    Parameters:
    -----------
    uploaded_file : file-like object
        .xlsx (openpyxl) or .xls workbook

    Returns:
    --------
    pd.DataFrame : First worksheet, first row used as header
    """
    try:
        return pd.read_excel(uploaded_file, sheet_name=0)
    except ImportError as e:
        raise DataLoadError(f"Missing Excel engine: {e}") from e
    except ValueError as e:
        raise DataLoadError(f"Unable to read workbook: {e}") from e


def load_uploaded_file(uploaded_file, file_name: Optional[str] = None) -> Dataset:
    """
    Decode an uploaded file into a Dataset

    Parameters:
    -----------
    uploaded_file : file-like object
        Object with ``read()``; Streamlit uploads also carry ``name``
    file_name : str, optional
        Overrides ``uploaded_file.name`` (used for the extension check)

    Returns:
    --------
    Dataset : records with numeric strings coerced once
    """
    name = file_name or getattr(uploaded_file, 'name', '') or ''
    suffix = Path(name).suffix.lower()

    if suffix == '.csv':
        frame = load_csv(uploaded_file)
    elif suffix in ('.xlsx', '.xls'):
        frame = load_excel(uploaded_file)
    else:
        raise DataLoadError(f"Unsupported file type: '{suffix or name}'. Use CSV, XLSX or XLS.")

    frame.columns = [str(c) for c in frame.columns]
    dataset = Dataset.from_dataframe(frame, name=name)
    logger.info("Loaded %s: %d rows x %d columns", name, len(dataset), len(dataset.headers))
    return dataset
