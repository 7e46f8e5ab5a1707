"""
Flat File Connection Manager extraction.

Finds the flat file connection managers declared in a package and pulls
their column definitions, in the order they appear in the package (that
order defines the byte layout of the file).
"""
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from models import ConnectionManagerInfo, FlatFileColumn
from .document_loader import NAMESPACES, dts, wrap_and_parse

logger = logging.getLogger(__name__)

FLAT_FILE_CREATION_NAME = 'flatfile'


class FlatFileParser:
    """Extracts flat file layouts from a loaded SSIS package."""

    def __init__(self):
        self.namespaces = NAMESPACES

    def find_connection_managers(self, root: ET.Element) -> List[ET.Element]:
        """
        All DTS:ConnectionManager elements directly under a
        DTS:ConnectionManagers element, in document order.

        The inner ObjectData/ConnectionManager elements are not matched.
        """
        declared = set()
        for managers in root.iter(dts('ConnectionManagers')):
            for conn_mgr in managers.findall('DTS:ConnectionManager', self.namespaces):
                declared.add(id(conn_mgr))

        return [conn_mgr for conn_mgr in root.iter(dts('ConnectionManager'))
                if id(conn_mgr) in declared]

    def find_flat_file_managers(
        self, root: ET.Element, warnings: Optional[List[str]] = None
    ) -> List[Tuple[ConnectionManagerInfo, ET.Element]]:
        """Connection managers whose DTS:CreationName is 'flatfile' (any case)."""
        if warnings is None:
            warnings = []

        flat_files = []
        for position, conn_mgr in enumerate(self.find_connection_managers(root), 1):
            creation_name = conn_mgr.get(dts('CreationName'))
            if creation_name is None or creation_name.lower() != FLAT_FILE_CREATION_NAME:
                logger.debug(f"Skipping connection manager #{position} ({creation_name})")
                continue

            name = conn_mgr.get(dts('ObjectName'))
            if not name:
                name = f'ConnectionManager{position}'
                warnings.append(
                    f"Connection manager #{position} has no DTS:ObjectName, using '{name}'"
                )

            info = ConnectionManagerInfo(
                name=name,
                creation_name=creation_name,
                dtsid=conn_mgr.get(dts('DTSID')),
                description=conn_mgr.get(dts('Description')),
                connection_string=self._extract_connection_string(conn_mgr),
            )
            flat_files.append((info, conn_mgr))

        return flat_files

    def _extract_connection_string(self, conn_mgr: ET.Element) -> Optional[str]:
        """Path of the described file, from ObjectData/ConnectionManager."""
        inner_conn = conn_mgr.find('DTS:ObjectData/DTS:ConnectionManager', self.namespaces)
        if inner_conn is None:
            return None
        return inner_conn.get(dts('ConnectionString'))

    def extract_columns(
        self, conn_mgr: ET.Element, warnings: Optional[List[str]] = None
    ) -> List[FlatFileColumn]:
        """
        Column definitions of one connection manager.

        The manager is serialized and reloaded on its own so that only its
        columns are found. Missing attributes are replaced by empty values
        and reported in ``warnings``.
        """
        if warnings is None:
            warnings = []

        fragment = ET.tostring(conn_mgr, encoding='unicode')
        source = conn_mgr.get(dts('ObjectName')) or '<connection manager>'
        fragment_root = wrap_and_parse(fragment, source)

        columns = []
        for position, column in enumerate(fragment_root.iter(dts('FlatFileColumn')), 1):
            values = {}
            for attribute, field, default in (
                ('ObjectName', 'name', ''),
                ('DataType', 'data_type', ''),
                ('ColumnWidth', 'column_width', '0'),
            ):
                value = column.get(dts(attribute))
                if value is None:
                    warnings.append(
                        f"{source}: column #{position} has no DTS:{attribute}, using '{default}'"
                    )
                    value = default
                values[field] = value

            columns.append(FlatFileColumn(
                column_type=column.get(dts('ColumnType')),
                column_delimiter=column.get(dts('ColumnDelimiter')),
                **values,
            ))

        logger.debug(f"{source}: {len(columns)} column(s)")
        return columns
