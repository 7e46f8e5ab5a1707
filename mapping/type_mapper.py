"""
Human readable labels for SSIS data type codes.

See https://msdn.microsoft.com/en-us/library/microsoft.sqlserver.dts.runtime.wrapper.datatype.aspx
"""
from typing import Dict, Optional

UNDEFINED_TYPE = 'undefined'

# Not exhaustive
TYPE_LABELS: Dict[str, str] = {
    '4': 'float [DT_R4]',
    '19': 'four-byte unsigned integer [DT_UI4]',
    '129': 'string [DT_STR]',
    '130': 'Unicode string [DT_WSTR]',
}


def get_human_type(data_type: Optional[str]) -> str:
    """Label for a DTS:DataType code, 'undefined' when unknown."""
    if data_type is None:
        return UNDEFINED_TYPE
    return TYPE_LABELS.get(data_type.strip(), UNDEFINED_TYPE)
