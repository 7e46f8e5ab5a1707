"""
Fixed-width layout calculation.

Each column occupies the bytes right after the previous one, starting at
offset 1. Widths come from DTS:ColumnWidth and are parsed leniently: the
leading integer is used and anything unparseable counts as 0.
"""
import re
import logging
from typing import List

from models import FlatFileColumn, LayoutRow
from .type_mapper import get_human_type

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r'\s*([+-]?\d+)')


def parse_width(value: str, default: int = 0) -> int:
    """Leading base-10 integer of ``value``, or ``default``."""
    if value is None:
        return default
    match = _LEADING_INTEGER.match(value)
    if match is None:
        logger.debug(f"Unparseable width {value!r}, using {default}")
        return default
    return int(match.group(1))


def calculate_layout(columns: List[FlatFileColumn]) -> List[LayoutRow]:
    """
    Layout rows for the columns, in their original order.

    Row numbers start at 2 (the header is row 1). A zero width gives
    ``end == start - 1`` and leaves the cursor where it was.
    """
    rows = []
    start = 1
    for i, column in enumerate(columns, 1):
        width = parse_width(column.column_width)
        end = start + width - 1
        rows.append(LayoutRow(
            index=i + 1,
            start=start,
            end=end,
            name=column.name,
            type_label=get_human_type(column.data_type),
            width=width,
        ))
        start = end + 1
    return rows
