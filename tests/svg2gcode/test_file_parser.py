"""Tests for SVG document parsing and path extraction."""
import pytest

from svg2gcode.file_parser import (
    DocumentParseError,
    Element,
    ParseError,
    Text,
    extract_path_data,
    parse_document,
    read_svg_file
)


class TestParseDocument:
    """Tests for parse_document."""

    def test_root_element(self):
        """Root <svg> keeps its attributes without namespace prefix."""
        root = parse_document('<svg xmlns="http://www.w3.org/2000/svg" width="10mm"></svg>')
        assert isinstance(root, Element)
        assert root.name == 'svg'
        assert root.attributes['width'] == '10mm'

    def test_namespaced_tags_are_stripped(self):
        """Namespaced element names become local names."""
        root = parse_document(
            '<svg xmlns="http://www.w3.org/2000/svg"><g><path d="M 0 0"/></g></svg>'
        )
        group = root.children[0]
        assert group.name == 'g'
        assert group.children[0].name == 'path'

    def test_text_nodes(self):
        """Character data becomes Text nodes."""
        root = parse_document('<svg><text>Hello</text></svg>')
        text_element = root.children[0]
        assert text_element.children == [Text('Hello')]

    def test_comments_are_dropped(self):
        """XML comments do not appear in the tree."""
        root = parse_document('<svg><!-- note --><path d="M 1 1"/></svg>')
        assert [child.name for child in root.children] == ['path']

    def test_malformed_document(self):
        """Broken markup raises DocumentParseError."""
        with pytest.raises(DocumentParseError):
            parse_document('<svg><path d="M 0 0"></svg>')

    def test_empty_document(self):
        """Empty input raises DocumentParseError."""
        with pytest.raises(DocumentParseError, match="empty"):
            parse_document('   ')

    def test_document_error_is_parse_error(self):
        """Callers can catch every input error as ParseError."""
        assert issubclass(DocumentParseError, ParseError)


class TestExtractPathData:
    """Tests for extract_path_data."""

    def test_document_order(self):
        """Paths are returned in document order across nested groups."""
        root = parse_document(
            '<svg>'
            '<path d="M 1 1"/>'
            '<g><path d="M 2 2"/><g><path d="M 3 3"/></g></g>'
            '<path d="M 4 4"/>'
            '</svg>'
        )
        assert extract_path_data(root) == ['M 1 1', 'M 2 2', 'M 3 3', 'M 4 4']

    def test_other_elements_ignored(self):
        """Shapes, text and non-container elements are skipped."""
        root = parse_document(
            '<svg>'
            '<rect x="0" y="0" width="5" height="5"/>'
            '<defs><path d="M 9 9"/></defs>'
            '<text>label</text>'
            '<path d="M 1 1"/>'
            '</svg>'
        )
        assert extract_path_data(root) == ['M 1 1']

    def test_path_without_d(self):
        """A <path> with no d attribute is skipped."""
        root = parse_document('<svg><path id="empty"/><path d="M 1 1"/></svg>')
        assert extract_path_data(root) == ['M 1 1']

    def test_transform_is_ignored(self):
        """Group transforms are not applied to the extracted data."""
        root = parse_document(
            '<svg><g transform="translate(10, 10)"><path d="M 0 0 L 5 0"/></g></svg>'
        )
        assert extract_path_data(root) == ['M 0 0 L 5 0']

    def test_list_of_nodes(self):
        """A list of sibling nodes may be passed directly."""
        nodes = [
            Text('ignored'),
            Element('path', {'d': 'M 1 1'}),
            Element('g', {}, [Element('path', {'d': 'M 2 2'})]),
        ]
        assert extract_path_data(nodes) == ['M 1 1', 'M 2 2']

    def test_no_paths(self):
        """A document without paths yields an empty list."""
        assert extract_path_data(parse_document('<svg/>')) == []


class TestReadSvgFile:
    """Tests for read_svg_file."""

    def test_read_file(self, tmp_path):
        """File content is returned unchanged."""
        svg_file = tmp_path / 'part.svg'
        svg_file.write_text('<svg/>', encoding='utf-8')
        assert read_svg_file(str(svg_file)) == '<svg/>'

    def test_missing_file(self, tmp_path):
        """A missing file raises ParseError."""
        with pytest.raises(ParseError, match="not found"):
            read_svg_file(str(tmp_path / 'missing.svg'))
