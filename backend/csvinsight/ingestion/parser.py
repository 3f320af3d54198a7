"""Delimiter detection and line splitting for uploaded CSV text."""
import logging
import re
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

Record = Dict[str, str]

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def detect_delimiter(text: str) -> str:
    """
    Pick the field delimiter for the whole file.
    
    Semicolon wins only when it is strictly more frequent than comma, since
    semicolon-separated exports use the comma as decimal separator.
    """
    return ";" if text.count(";") > text.count(",") else ","


def parse_records(text: str) -> Tuple[List[str], List[Record]]:
    """
    Split CSV text into headers and records.
    
    Blank lines are skipped. Fields are trimmed. A row shorter than the header
    leaves the trailing columns out of its record; extra fields are ignored.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    
    lines = [line for line in _LINE_BREAK_RE.split(text) if line.strip()]
    if not lines:
        return [], []
    
    delimiter = detect_delimiter(text)
    headers = [h.strip() for h in lines[0].split(delimiter)]
    logger.debug("Splitting %d lines on %r", len(lines), delimiter)
    
    records: List[Record] = []
    for line in lines[1:]:
        fields = line.split(delimiter)
        record: Record = {}
        for position, header in enumerate(headers):
            if position < len(fields):
                record[header] = fields[position].strip()
        records.append(record)
    
    return headers, records
