"""
Workspace management functions
Immutable dataset container and the explicit analysis cache
"""

import logging
import math
import uuid
from typing import Any, Callable, Dict, Hashable, List, Mapping, NamedTuple, Optional, Sequence, Tuple

import pandas as pd

from profiling_utils import classify, coerce_record

logger = logging.getLogger(__name__)


class Dataset:
    """
    Ordered, read-only collection of records produced by ingestion.

    Every instance carries a ``token`` that identifies it in cache keys.
    Two datasets built from the same rows still get different tokens, since
    identity (not content) drives recomputation.

    Parameters
    ----------
    records : sequence of dict
        Rows whose values are already coerced
    name : str
        Display name (usually the uploaded file name)
    """

    def __init__(self, records: Sequence[Mapping[str, Any]], name: str = "Dataset"):
        self._records = tuple(dict(r) for r in records)
        self._name = name
        self._token = uuid.uuid4().hex
        self._headers = tuple(self._records[0].keys()) if self._records else ()

    @classmethod
    def from_records(
        cls,
        records: Sequence[Mapping[str, Any]],
        name: str = "Dataset"
    ) -> "Dataset":
        """Build a dataset, coercing numeric strings exactly once."""
        return cls([coerce_record(r) for r in records], name=name)

    @classmethod
    def from_dataframe(cls, dataframe: pd.DataFrame, name: str = "Dataset") -> "Dataset":
        """
        Build a dataset from a decoded DataFrame.

        NaN cells become ``None`` (Missing); column order becomes header order.
        """
        frame = dataframe.astype(object).where(pd.notna(dataframe), None)
        records = frame.to_dict(orient='records')
        return cls.from_records(records, name=name)

    @property
    def records(self) -> Tuple[Dict[str, Any], ...]:
        return self._records

    @property
    def headers(self) -> Tuple[str, ...]:
        return self._headers

    @property
    def name(self) -> str:
        return self._name

    @property
    def token(self) -> str:
        return self._token

    def column(self, field: str) -> List[Any]:
        """All values of ``field`` in row order (``None`` for absent keys)."""
        return [row.get(field) for row in self._records]

    def classify(self) -> Tuple[List[str], List[str], List[str]]:
        return classify(self)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset(name={self._name!r}, rows={len(self)}, columns={len(self._headers)})"


class AnalysisCache:
    """
    Memo table for derived results.

    Keys are ``(dataset token, operation, selection)``. Results are pure
    functions of that key, so a hit can be returned as is. Replacing the
    dataset must be followed by ``invalidate()``.
    """

    def __init__(self):
        self._entries: Dict[Tuple[str, str, Hashable], Any] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self,
        dataset: Dataset,
        operation: str,
        selection: Hashable,
        compute: Callable[[], Any]
    ) -> Any:
        """Return the cached result for the key or compute and store it."""
        key = (dataset.token, operation, selection)
        if key in self._entries:
            self.hits += 1
            logger.debug("Cache hit: %s %r", operation, selection)
            return self._entries[key]

        self.misses += 1
        logger.debug("Cache miss: %s %r", operation, selection)
        result = compute()
        self._entries[key] = result
        return result

    def invalidate(self, dataset: Optional[Dataset] = None) -> None:
        """Drop every entry, or only the entries of ``dataset``."""
        if dataset is None:
            self._entries.clear()
        else:
            self._entries = {
                k: v for k, v in self._entries.items() if k[0] != dataset.token
            }
        logger.debug("Analysis cache invalidated (%d entries left)", len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries


class Page(NamedTuple):
    number: int
    page_count: int
    start: int
    stop: int


def paginate(n_rows: int, page: int, page_size: int = 50) -> Page:
    """
    Row window of a 1-based page, clamped to the valid range.

    ``start``/``stop`` are slice bounds; an empty dataset has one empty page.
    """
    page_count = max(1, math.ceil(n_rows / page_size))
    number = min(max(page, 1), page_count)
    start = (number - 1) * page_size
    stop = min(start + page_size, n_rows)
    return Page(number=number, page_count=page_count, start=start, stop=stop)
