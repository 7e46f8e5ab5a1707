"""
Column Mapping Module.

Translates SSIS data type codes into readable labels and computes the
byte offsets of fixed-width columns.
"""
from .type_mapper import get_human_type, TYPE_LABELS, UNDEFINED_TYPE
from .layout_calculator import calculate_layout, parse_width

__all__ = ["get_human_type", "TYPE_LABELS", "UNDEFINED_TYPE", "calculate_layout", "parse_width"]
