"""
Serialization of layout rows as semicolon-separated text.

Values are written as they are: a semicolon inside a field name is not
escaped and will shift the remaining fields of that line.
"""
from typing import List

from models import LayoutRow

HEADER = '#;Start;End;FieldName;FieldType;FieldSize'
DELIMITER = ';'
LINE_SEPARATOR = '\n'


def format_row(row: LayoutRow) -> str:
    """One semicolon-separated line, without line separator."""
    return DELIMITER.join(str(value) for value in (
        row.index, row.start, row.end, row.name, row.type_label, row.width
    ))


def serialize_rows(rows: List[LayoutRow]) -> str:
    """Header line plus one line per row, each ending with a newline."""
    lines = [HEADER] + [format_row(row) for row in rows]
    return ''.join(line + LINE_SEPARATOR for line in lines)
