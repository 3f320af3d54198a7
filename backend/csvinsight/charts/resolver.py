"""
Axis field resolution for chart records.

Records usually come from a generative model that does not always use the
field names it was asked for, so each axis walks a fallback chain instead of
trusting the hints.
"""
import logging
import math
from typing import Any, List, Mapping, Optional, Sequence

from csvinsight.charts.models import ChartFieldSelection, ChartInsight, ChartType
from csvinsight.ingestion.values import parse_number

logger = logging.getLogger(__name__)

PREFERRED_LABEL_FIELDS = ("label", "name", "category")
PREFERRED_VALUE_FIELD = "value"


def is_numeric_value(value: Any) -> bool:
    """True for real numbers and numeric strings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        return parse_number(value) is not None
    return False


def _resolve_category_key(first: Mapping[str, Any], hint: Optional[str]) -> str:
    if hint and hint in first and not is_numeric_value(first[hint]):
        return hint
    for name in PREFERRED_LABEL_FIELDS:
        if name in first:
            return name
    for key, value in first.items():
        if not is_numeric_value(value):
            return key
    return next(iter(first))


def _resolve_value_key(
    first: Mapping[str, Any],
    hint: Optional[str],
    category_key: str
) -> str:
    if hint and hint in first:
        return hint
    if PREFERRED_VALUE_FIELD in first:
        return PREFERRED_VALUE_FIELD
    
    numeric_keys = [key for key, value in first.items() if is_numeric_value(value)]
    for key in numeric_keys:
        if key != category_key:
            return key
    if numeric_keys:
        return numeric_keys[0]
    
    keys = list(first)
    return keys[1] if len(keys) > 1 else keys[0]


def resolve_fields(
    records: Sequence[Mapping[str, Any]],
    category_hint: Optional[str] = None,
    value_hint: Optional[str] = None
) -> ChartFieldSelection:
    """
    Pick the label axis and the numeric axis for a record array.
    
    The shape is read from the first record. Returns
    ``ChartFieldSelection.no_data()`` when there is nothing to plot.
    """
    if not records or not records[0]:
        return ChartFieldSelection.no_data()
    
    first = records[0]
    category_key = _resolve_category_key(first, category_hint)
    value_key = _resolve_value_key(first, value_hint, category_key)
    
    if category_hint and category_hint != category_key:
        logger.debug("Category hint %r not usable, using %r", category_hint, category_key)
    if value_hint and value_hint != value_key:
        logger.debug("Value hint %r not usable, using %r", value_hint, value_key)
    
    return ChartFieldSelection(category_key=category_key, value_key=value_key)


def resolve_for_insight(insight: ChartInsight) -> ChartFieldSelection:
    """Resolve fields using the hints that apply to the insight's chart type."""
    hints = insight.chart_representation
    if insight.type is ChartType.PIE:
        return resolve_fields(insight.data, hints.name_key, hints.data_key)
    return resolve_fields(insight.data, hints.x_axis, hints.y_axis)


def category_labels(records: Sequence[Mapping[str, Any]], key: str) -> List[Optional[str]]:
    """String labels along the category axis; None where a record has no usable label."""
    labels = []
    for record in records:
        value = record.get(key)
        labels.append(str(value) if value is not None and value != "" else None)
    return labels
