"""
SSIS Package Parsing Module.

Loads .dtsx packages and extracts the column layout of their flat file
connection managers.

Usage:
    from parsing import FlatFileParser, load_file

    root = load_file('Package.dtsx')
    parser = FlatFileParser()
    for info, element in parser.find_flat_file_managers(root):
        columns = parser.extract_columns(element)
"""

from .document_loader import load_document, load_file, wrap_and_parse, DTS_NAMESPACE
from .flat_file_parser import FlatFileParser

__all__ = ["FlatFileParser", "load_document", "load_file", "wrap_and_parse", "DTS_NAMESPACE"]
