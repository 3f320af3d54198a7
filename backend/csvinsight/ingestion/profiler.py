"""Column profiling for uploaded CSV files."""
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from csvinsight.ingestion.models import (
    Aggregates,
    CategorySummary,
    ColumnKind,
    DateSummary,
    MonthCount,
    NumberSummary,
    ValueCount,
)
from csvinsight.ingestion.parser import parse_records
from csvinsight.ingestion.values import is_date_like, parse_date, parse_number

logger = logging.getLogger(__name__)

TOP_VALUES_LIMIT = 10
EMPTY_PLACEHOLDER = "(empty)"


@dataclass(frozen=True)
class TypeThresholds:
    """
    Vote thresholds for column classification.
    
    A kind wins when its votes reach ``max(min_votes, ratio * total)``. The
    floor keeps tiny columns from being classified on one or two lucky cells.
    """
    min_votes: int = 3
    numeric_ratio: float = 0.6
    date_ratio: float = 0.5


DEFAULT_THRESHOLDS = TypeThresholds()


def classify_column(
    numeric_count: int,
    date_count: int,
    total: int,
    thresholds: TypeThresholds = DEFAULT_THRESHOLDS
) -> ColumnKind:
    """Decide number, date or category from per-column vote counts."""
    if numeric_count >= max(thresholds.min_votes, thresholds.numeric_ratio * total):
        return ColumnKind.NUMBER
    if date_count >= max(thresholds.min_votes, thresholds.date_ratio * total):
        return ColumnKind.DATE
    return ColumnKind.CATEGORY


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


class ColumnProfiler:
    """Profile CSV columns into the aggregates contract."""
    
    def __init__(
        self,
        thresholds: TypeThresholds = DEFAULT_THRESHOLDS,
        top_values_limit: int = TOP_VALUES_LIMIT,
        empty_placeholder: str = EMPTY_PLACEHOLDER
    ):
        self.thresholds = thresholds
        self.top_values_limit = top_values_limit
        self.empty_placeholder = empty_placeholder
    
    def profile_file(self, file_path: str) -> Aggregates:
        """Profile a CSV file on disk."""
        return self.profile_text(Path(file_path).read_text(encoding="utf-8-sig"))
    
    def profile_text(self, csv_text: str) -> Aggregates:
        """
        Profile raw CSV text.
        
        Returns an empty ``Aggregates`` (no headers, no rows) for blank input
        rather than raising.
        """
        headers, records = parse_records(csv_text or "")
        if not headers:
            return Aggregates()
        
        logger.debug("Profiling %d rows x %d columns", len(records), len(headers))
        
        columns = {}
        for header in headers:
            if header in columns:
                continue
            values = pd.Series([record.get(header) for record in records], dtype=object)
            columns[header] = self._profile_column(header, values)
        
        return Aggregates(
            headers=headers,
            row_count=len(records),
            samples=records,
            columns=columns,
        )
    
    def _profile_column(self, header: str, values: pd.Series):
        """Profile a single column; missing cells are None."""
        defined = values.dropna()
        kind = self._infer_type(defined)
        logger.debug("Column %r classified as %s", header, kind.value)
        
        if kind is ColumnKind.NUMBER:
            return self._number_summary(defined)
        if kind is ColumnKind.DATE:
            return self._date_summary(defined)
        return self._category_summary(values)
    
    def _infer_type(self, defined: pd.Series) -> ColumnKind:
        numeric_count = sum(1 for v in defined if parse_number(v) is not None)
        date_count = sum(1 for v in defined if is_date_like(v))
        return classify_column(numeric_count, date_count, len(defined), self.thresholds)
    
    def _number_summary(self, defined: pd.Series) -> NumberSummary:
        parsed = [n for n in (parse_number(v) for v in defined) if n is not None]
        if not parsed:
            return NumberSummary()
        
        numbers = pd.Series(parsed, dtype="float64")
        count = len(numbers)
        total = _finite(float(numbers.sum()))
        return NumberSummary(
            count=count,
            sum=total,
            mean=_finite(total / count),
            min=float(numbers.min()),
            max=float(numbers.max()),
        )
    
    def _date_summary(self, defined: pd.Series) -> DateSummary:
        dates = [d for d in (parse_date(v) for v in defined) if d is not None]
        if not dates:
            return DateSummary()
        
        months = pd.Series([f"{d.year:04d}-{d.month:02d}" for d in dates])
        by_month = months.value_counts().sort_index()
        return DateSummary(
            by_month=[MonthCount(month=m, count=int(c)) for m, c in by_month.items()],
            min_date=min(dates).isoformat(),
            max_date=max(dates).isoformat(),
        )
    
    def _category_summary(self, values: pd.Series) -> CategorySummary:
        if values.empty:
            return CategorySummary()
        
        labels = values.map(self._category_label)
        first_seen = pd.unique(labels)
        counts = (
            labels.value_counts()
            .reindex(first_seen)
            .sort_values(ascending=False, kind="stable")
        )
        top = counts.head(self.top_values_limit)
        return CategorySummary(
            distinct_count=len(counts),
            top_values=[ValueCount(value=v, count=int(c)) for v, c in top.items()],
        )
    
    def _category_label(self, value: Optional[str]) -> str:
        if value is None:
            return self.empty_placeholder
        text = str(value).strip()
        return text or self.empty_placeholder


_default_profiler = ColumnProfiler()


def summarize(csv_text: str) -> Aggregates:
    """Compute the aggregates contract for raw CSV text."""
    return _default_profiler.profile_text(csv_text)
