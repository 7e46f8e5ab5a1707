"""
Document loading for SSIS packages.

SSIS stores everything under the ``DTS`` namespace prefix. A connection
manager cut out of a package no longer carries the ``xmlns:DTS``
declaration, so fragments are parsed inside a synthetic root element that
binds the prefix.
"""
import re
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from exceptions import MalformedXMLError, UnreadableInputError

logger = logging.getLogger(__name__)

DTS_NAMESPACE = 'www.microsoft.com/SqlServer/Dts'
NAMESPACES = {'DTS': DTS_NAMESPACE}

ET.register_namespace('DTS', DTS_NAMESPACE)

_XML_DECLARATION = re.compile(r'^\s*<\?xml[^>]*\?>', re.IGNORECASE)


def dts(name: str) -> str:
    """Qualified ElementTree name for a DTS tag or attribute."""
    return f'{{{DTS_NAMESPACE}}}{name}'


def wrap_and_parse(fragment: str, source: str = '<fragment>') -> ET.Element:
    """Parse a fragment inside a root element declaring the DTS prefix."""
    wrapped = (
        '<?xml version="1.0" standalone="yes"?>'
        f'<root xmlns:DTS="{DTS_NAMESPACE}">'
        f'{fragment}'
        '</root>'
    )
    try:
        return ET.fromstring(wrapped)
    except ET.ParseError as e:
        raise MalformedXMLError(source, str(e)) from e


def load_document(text: str, source: str = '<string>') -> ET.Element:
    """
    Parse package text into an element tree.

    Complete documents (with an XML declaration) are parsed as they are;
    anything else, or a document that only fails because the DTS prefix is
    unbound, goes through wrap_and_parse.
    """
    match = _XML_DECLARATION.match(text)
    if match is None:
        return wrap_and_parse(text, source)

    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        logger.debug(f"Direct parse of {source} failed ({e}), retrying wrapped")
        return wrap_and_parse(text[match.end():], source)


def load_file(file_path: str, encoding: str = 'utf-8-sig') -> ET.Element:
    """Read a whole .dtsx file and parse it."""
    path = Path(file_path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableInputError(path.name, str(e)) from e
    return load_document(text, path.name)
