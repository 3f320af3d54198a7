"""
Locale-aware parsing of single CSV cells.

Exports from European and Brazilian spreadsheets write ``1.234,56`` where
international tools write ``1234.56``. Nothing in a CSV says which convention
a file uses, so numbers are parsed with two ordered attempts:

1. comma-decimal: when the text contains a comma or is dot-grouped in threes
   (``1.234.567``). Every ``.`` is dropped as a thousands separator and the
   first ``,`` becomes the decimal point.
2. plain: the original text as an international number.

``"1,234"`` is genuinely ambiguous (1.234 or 1234). The comma-decimal reading
wins, which matches what the upload flow has always done. For the same
reason ``"1.000"`` reads as 1000.
"""
import math
import re
from datetime import date
from typing import Any, Optional

import pandas as pd


_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_THOUSANDS_RE = re.compile(r"^[+-]?\d{1,3}(?:\.\d{3})+(?:,\d+)?$")
_DAY_FIRST_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:[ T]\S.*)?$")
_YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _strict_float(text: str) -> Optional[float]:
    if not _NUMBER_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def parse_number(value: Any) -> Optional[float]:
    """Parse a cell as a number, returning None when it is not one."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    
    if "," in text or _THOUSANDS_RE.match(text):
        number = _strict_float(text.replace(".", "").replace(",", ".", 1))
        if number is not None:
            return number
    
    return _strict_float(text)


def _generic_date(text: str) -> Optional[date]:
    # pandas fills missing parts from the clock, so the year must be in the text.
    years = _YEAR_RE.findall(text)
    if not years:
        return None
    try:
        ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    if f"{ts.year:04d}" not in years:
        return None
    return ts.date()


def is_date_like(value: Any) -> bool:
    """
    Loose date check used only for column classification votes.
    
    Accepts D/M/YYYY (optionally followed by a time), YYYY-MM-DD, or
    anything pandas can parse as a date with an explicit four-digit year.
    """
    if value is None:
        return False
    text = str(value).strip()
    if not text:
        return False
    if _DAY_FIRST_RE.match(text) or _ISO_DATE_RE.match(text):
        return True
    return _generic_date(text) is not None


def parse_date(value: Any) -> Optional[date]:
    """Extract a calendar date, reading slash dates as day/month/year."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    
    match = _DAY_FIRST_RE.match(text)
    if match:
        day, month, year = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None
    
    return _generic_date(text)
