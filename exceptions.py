"""
Error kinds raised while exporting flat file specifications.
"""


class FlatFileSpecError(Exception):
    """Base class for exporter errors."""


class MalformedXMLError(FlatFileSpecError):
    """The package (or a re-serialized subtree) is not well-formed XML."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"Malformed XML in {source}: {message}")


class UnwritableOutputError(FlatFileSpecError):
    """An output file could not be created or written."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Cannot write {path}: {message}")


class UnreadableInputError(FlatFileSpecError):
    """A package file could not be read or decoded."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"Cannot read {source}: {message}")
