"""
Writing generated specifications to disk.
"""
import logging
from pathlib import Path

from exceptions import UnwritableOutputError

logger = logging.getLogger(__name__)

# Connection manager names are used as file names and must stay inside
# the output directory.
_FORBIDDEN_NAME_PARTS = ('/', '\\')
_FORBIDDEN_NAMES = ('', '.', '..')


def output_path(directory: str, name: str) -> Path:
    """Path of the .csv file generated for connection manager ``name``."""
    return Path(directory) / f'{name}.csv'


def write_csv(directory: str, name: str, content: str, encoding: str = 'utf-8') -> Path:
    """
    Write ``{name}.csv`` in ``directory``, replacing any existing file.

    Line endings are written untranslated so reruns produce identical bytes.
    Names containing a path separator are refused.
    """
    path = output_path(directory, name)
    if name in _FORBIDDEN_NAMES or any(part in name for part in _FORBIDDEN_NAME_PARTS):
        raise UnwritableOutputError(str(path), f"invalid file name {name!r}")

    try:
        with open(path, 'w', encoding=encoding, newline='') as f:
            f.write(content)
    except OSError as e:
        raise UnwritableOutputError(str(path), str(e)) from e
    logger.debug(f"Wrote {path} ({len(content)} chars)")
    return path
