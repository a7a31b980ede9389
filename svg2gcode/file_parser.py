"""SVG document parsing and path extraction.

The document is converted into a small tree of `Element` and `Text` nodes so
that extraction never probes arbitrary XML objects for attributes.
Coordinate transforms on groups or paths are NOT applied: geometry under a
transformed group is machined at its untransformed coordinates.
"""
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, List, Union

logger = logging.getLogger(__name__)

CONTAINER_TAGS = ('svg', 'g')


class ParseError(Exception):
    """Custom exception for parsing errors."""
    pass


class DocumentParseError(ParseError):
    """The source document is not well-formed SVG/XML."""
    pass


@dataclass
class Text:
    value: str


@dataclass
class Element:
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List['Node'] = field(default_factory=list)


Node = Union[Element, Text]


def _local_name(tag: str) -> str:
    """Strip an XML namespace: '{http://www.w3.org/2000/svg}path' -> 'path'."""
    if tag.startswith('{'):
        return tag.split('}', 1)[1]
    return tag


def _convert(xml_element: ET.Element) -> Element:
    children: List[Node] = []
    if xml_element.text and xml_element.text.strip():
        children.append(Text(xml_element.text))
    for child in xml_element:
        # Comments and processing instructions have non-string tags
        if isinstance(child.tag, str):
            children.append(_convert(child))
        if child.tail and child.tail.strip():
            children.append(Text(child.tail))

    attributes = {_local_name(key): value for key, value in xml_element.attrib.items()}
    return Element(_local_name(xml_element.tag), attributes, children)


def parse_document(source_document: str) -> Element:
    """
    Parse SVG markup into an Element tree.

    Args:
        source_document: SVG document text

    Returns:
        Root Element (normally the <svg> element)

    Raises:
        DocumentParseError: if the markup is empty or not well-formed
    """
    if not source_document or not source_document.strip():
        raise DocumentParseError("SVG document is empty")

    try:
        root = ET.fromstring(source_document)
    except ET.ParseError as e:
        raise DocumentParseError(f"Invalid SVG document: {str(e)}")

    return _convert(root)


def extract_path_data(nodes: Union[Node, List[Node]]) -> List[str]:
    """
    Collect the `d` attribute of every <path>, in document order.

    Only <svg> and <g> containers are descended into. Any other element,
    text nodes and paths without a `d` attribute are skipped.

    Args:
        nodes: A node or list of sibling nodes

    Returns:
        List of raw path-data strings
    """
    if not isinstance(nodes, list):
        nodes = [nodes]

    paths = []
    for node in nodes:
        if isinstance(node, Text):
            continue
        if node.name == 'path':
            d = node.attributes.get('d')
            if isinstance(d, str):
                paths.append(d)
        elif node.name in CONTAINER_TAGS:
            paths.extend(extract_path_data(node.children))
    return paths


def read_svg_file(file_path: str) -> str:
    """Read an SVG file, returning its text."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise ParseError(f"Input file not found: {file_path}")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Error reading file {file_path}: {str(e)}")

    logger.debug("Read %d characters from %s", len(content), file_path)
    return content
