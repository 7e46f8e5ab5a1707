"""
Data models for the DTSX flat file specification exporter.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class FlatFileColumn(BaseModel):
    """A DTS:FlatFileColumn as found in the package (raw attribute text)."""
    name: str = ""
    data_type: str = ""
    column_width: str = "0"
    column_type: Optional[str] = None
    column_delimiter: Optional[str] = None


class ConnectionManagerInfo(BaseModel):
    """A flat file DTS:ConnectionManager declaration."""
    name: str
    creation_name: str
    dtsid: Optional[str] = None
    description: Optional[str] = None
    connection_string: Optional[str] = None


class LayoutRow(BaseModel):
    """One line of the generated specification."""
    index: int
    start: int
    end: int
    name: str
    type_label: str
    width: int


class ConnectionManagerExport(BaseModel):
    """Outcome of exporting one flat file connection manager."""
    connection: ConnectionManagerInfo
    output_file: str
    content: str = ""
    column_count: int = 0
    columns: List[FlatFileColumn] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    success: bool = Field(default=False)
    error: Optional[str] = None


class PackageExport(BaseModel):
    """Outcome of processing one .dtsx file."""
    package_file: str
    exports: List[ConnectionManagerExport] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    success: bool = Field(default=False)
    error: Optional[str] = None


class ExportReport(BaseModel):
    """Outcome of a whole batch run."""
    input_directory: str
    output_directory: str
    packages: List[PackageExport] = Field(default_factory=list)

    @property
    def failed_count(self) -> int:
        failed = 0
        for package in self.packages:
            if not package.success:
                failed += 1
                continue
            failed += sum(1 for e in package.exports if not e.success)
        return failed
