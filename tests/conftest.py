"""
Shared fixtures for the exporter test suite.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), os.pardir))

DTS_NS = 'www.microsoft.com/SqlServer/Dts'


def make_column(name=None, data_type=None, width=None, column_type='FixedWidth'):
    attributes = [f'DTS:ColumnType="{column_type}"']
    if width is not None:
        attributes.append(f'DTS:ColumnWidth="{width}"')
    if data_type is not None:
        attributes.append(f'DTS:DataType="{data_type}"')
    if name is not None:
        attributes.append(f'DTS:ObjectName="{name}"')
    return f'<DTS:FlatFileColumn {" ".join(attributes)} />'


def make_manager(name, creation_name='FLATFILE', columns=(), connection_string=None):
    """A 2012-format connection manager declaration."""
    outer = [f'DTS:refId="Package.ConnectionManagers[{name}]"']
    if creation_name is not None:
        outer.append(f'DTS:CreationName="{creation_name}"')
    outer.append('DTS:DTSID="{B9B2F5A1-0000-4000-8000-000000000001}"')
    if name is not None:
        outer.append(f'DTS:ObjectName="{name}"')
    inner = 'DTS:Format="FixedWidth"'
    if connection_string is not None:
        inner += f' DTS:ConnectionString="{connection_string}"'
    column_xml = '\n'.join(make_column(*column) for column in columns)
    return (
        f'<DTS:ConnectionManager {" ".join(outer)}>\n'
        '  <DTS:ObjectData>\n'
        f'    <DTS:ConnectionManager {inner}>\n'
        '      <DTS:FlatFileColumns>\n'
        f'{column_xml}\n'
        '      </DTS:FlatFileColumns>\n'
        '    </DTS:ConnectionManager>\n'
        '  </DTS:ObjectData>\n'
        '</DTS:ConnectionManager>'
    )


def make_package(*managers, declare_namespace=True):
    namespace = f' xmlns:DTS="{DTS_NS}"' if declare_namespace else ''
    return (
        '<?xml version="1.0"?>\n'
        f'<DTS:Executable{namespace} DTS:refId="Package" '
        'DTS:CreationName="Microsoft.Package" DTS:ObjectName="Package">\n'
        '<DTS:ConnectionManagers>\n'
        + '\n'.join(managers) +
        '\n</DTS:ConnectionManagers>\n'
        '<DTS:Executables />\n'
        '</DTS:Executable>\n'
    )


CUSTOMERS_COLUMNS = [('Title', '130', '13'), ('Gender', '130', '6')]


@pytest.fixture
def customers_package():
    """Package with one flat file manager (Customers) and one OLE DB manager."""
    return make_package(
        make_manager('Customers', 'FlatFile', CUSTOMERS_COLUMNS,
                     connection_string='C:\\data\\customers.txt'),
        make_manager('Warehouse', 'OLEDB'),
    )


@pytest.fixture
def package_dir(tmp_path, customers_package):
    """Folder holding a single Package.dtsx."""
    (tmp_path / 'Package.dtsx').write_text(customers_package, encoding='utf-8')
    return tmp_path
