"""
Data export functions
Column summaries as an Excel workbook
"""

import io
from datetime import datetime
from typing import Dict, Optional

import pandas as pd

from eda_utils.eda_calculations import SummaryStats, summaries_to_dataframe


def export_summaries_to_excel(
    summaries: Dict[str, Optional[SummaryStats]],
    correlation: Optional[pd.DataFrame] = None,
    dataset_name: str = "Dataset",
) -> io.BytesIO:
    """
    Export column summaries to a multi-sheet Excel workbook.

    Sheets
    ------
    - ``Summary``     : one row per numeric column
    - ``Correlation`` : Pearson matrix (if provided)
    - ``Metadata``    : generation timestamp, source name

    Parameters
    ----------
    summaries : dict
        Output of ``run_summary_for_all_columns``
    correlation : pd.DataFrame, optional
        ``CorrelationMatrix.to_dataframe()``
    dataset_name : str
        Shown in the metadata sheet

    Returns
    -------
    BytesIO
        In-memory Excel file ready for ``st.download_button``
    """
    summary_df = summaries_to_dataframe(summaries)

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine='openpyxl') as writer:
        summary_df.to_excel(writer, sheet_name='Summary', index=False)

        if correlation is not None and not correlation.empty:
            correlation.to_excel(writer, sheet_name='Correlation', index=True)

        meta_df = pd.DataFrame({
            'Property': ['Report Type', 'Dataset', 'Generated', 'Variables Analysed'],
            'Value': [
                'Column Summary Report',
                dataset_name,
                datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
                len(summaries),
            ],
        })
        meta_df.to_excel(writer, sheet_name='Metadata', index=False)

    buf.seek(0)
    return buf
