"""
Specification Export Module.

Renders layout rows as CSV text and writes one file per connection manager.
"""
from .csv_serializer import serialize_rows, HEADER, DELIMITER
from .csv_writer import write_csv, output_path

__all__ = ["serialize_rows", "HEADER", "DELIMITER", "write_csv", "output_path"]
