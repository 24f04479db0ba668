"""Extraction of string literal segments from Swift source files."""

import re
import threading
from typing import Iterator, List, Set, Union

from tree_sitter_language_pack import get_parser

from ..errors import FileDecodeError, FileParseError, GrammarLoadError
from .encoding import SOURCE_ENCODINGS, decode_text

LINE_LITERAL = "line_string_literal"
MULTI_LINE_LITERAL = "multi_line_string_literal"
RAW_LITERAL = "raw_string_literal"
STRING_LITERALS = frozenset({LINE_LITERAL, MULTI_LINE_LITERAL, RAW_LITERAL})

# Children of a literal node that belong to its static text
TEXT_NODES = frozenset({
    "line_str_text",
    "multi_line_str_text",
    "str_escaped_char",
    "raw_str_part",
    "raw_str_end_part",
    '"',
})

# Children that start an interpolation inside a literal
INTERPOLATIONS = frozenset({
    "\\(",
    "interpolated_expression",
    "raw_str_interpolation",
    "raw_str_interpolation_start",
})

RAW_OPENING = re.compile(r'^#+"(?:"")?')
RAW_MULTI_LINE_OPENING = re.compile(rb'#+"""')
RAW_CLOSING = re.compile(r'(?:"")?"#+$')
# Indentation before a closing """ is not content
MULTI_LINE_CLOSING = re.compile(r"\n[ \t]*$")


class SwiftLiteralExtractor:
    """
    Collects the static text of every string literal in a Swift file.

    Source is parsed into a full syntax tree with tree-sitter, so text inside
    comments never counts as a literal. Each literal is split at its
    interpolations; every static segment is collected as written in the source,
    escapes included, which is the same form keys take in .strings files.
    """

    def __init__(self, language: str = "swift"):
        self.language = language
        self._local = threading.local()
        # Fail before any file is scanned if the grammar is unavailable
        self.parser

    @property
    def parser(self):
        """
        The tree-sitter parser owned by the calling thread.

        Raises:
            GrammarLoadError: If the grammar cannot be loaded or downloaded
        """
        parser = getattr(self._local, "parser", None)
        if parser is None:
            try:
                parser = get_parser(self.language)
            except Exception as e:
                raise GrammarLoadError(f"Could not load the {self.language} grammar: {e}") from e
            self._local.parser = parser
        return parser

    def extract(self, source: Union[str, bytes], file: str = "<memory>") -> Set[str]:
        """
        Extract literal segments from Swift source.

        Args:
            source: Swift source text
            file: File name used in error messages

        Returns:
            Set of static literal segments

        Raises:
            FileParseError: If the source contains syntax errors
        """
        data = source.encode("utf-8") if isinstance(source, str) else source
        tree = self.parser.parse(data)
        root = tree.root_node

        if root.has_error:
            raise FileParseError(file, f"Syntax error near line {self._first_error_line(root)}")

        literals = set()
        for node in self._walk(root):
            for segment in self._segments(node, data):
                if segment:
                    literals.add(segment)
        return literals

    def extract_bytes(self, data: bytes, file: str = "<memory>") -> Set[str]:
        """
        Decode raw Swift file content as UTF-8 and extract its literals.

        Raises:
            FileDecodeError: If the content is not valid UTF-8
            FileParseError: If the source contains syntax errors
        """
        try:
            decode_text(data, SOURCE_ENCODINGS)
        except UnicodeDecodeError as e:
            raise FileDecodeError(file, f"Could not read file: {e.reason}") from e

        return self.extract(data, file=file)

    def _walk(self, root) -> Iterator:
        """Yield every string literal node in document order, nested ones included."""
        cursor = root.walk()
        while True:
            if cursor.node.type in STRING_LITERALS:
                yield cursor.node
            if cursor.goto_first_child():
                continue
            while not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    return

    def _segments(self, node, data: bytes) -> List[str]:
        """
        Split a literal node into the source text of its static segments.

        A segment spans from the end of the preceding delimiter or
        interpolation to the start of the next one, so whitespace the grammar
        leaves outside text nodes stays part of the segment.
        """
        children = node.children
        if node.type in (LINE_LITERAL, MULTI_LINE_LITERAL):
            # Opening and closing delimiters
            region_start, region_end = children[0].end_byte, children[-1].start_byte
            children = children[1:-1]
        else:
            region_start, region_end = node.start_byte, node.end_byte

        if not children:
            return []

        segments = []
        in_text = False
        start = region_start
        starts_at_open = None
        interpolated = False
        for child in children:
            if child.type in TEXT_NODES:
                if not in_text:
                    if starts_at_open is None:
                        starts_at_open = not interpolated
                    interpolated = False
                in_text = True
                continue
            if in_text:
                segments.append(data[start:child.start_byte].decode("utf-8"))
                in_text = False
            if child.type in INTERPOLATIONS:
                interpolated = True
            start = child.end_byte
        if in_text:
            segments.append(data[start:region_end].decode("utf-8"))

        if not segments:
            return segments

        ends_at_close = not interpolated
        multi_line = node.type == MULTI_LINE_LITERAL
        if node.type == RAW_LITERAL:
            multi_line = RAW_MULTI_LINE_OPENING.match(data, node.start_byte) is not None
            if starts_at_open:
                segments[0] = RAW_OPENING.sub("", segments[0])
            if ends_at_close:
                segments[-1] = RAW_CLOSING.sub("", segments[-1])

        if multi_line:
            segments = self._strip_multi_line(segments, starts_at_open, ends_at_close)
        return segments

    def _strip_multi_line(self, segments: List[str], starts_at_open: bool,
                          ends_at_close: bool) -> List[str]:
        """Drop the newline after the opening delimiter and the closing indentation."""
        indent = ""
        if ends_at_close:
            closing = MULTI_LINE_CLOSING.search(segments[-1])
            if closing:
                indent = closing.group(0)[1:]
                segments[-1] = segments[-1][:closing.start()]
        if starts_at_open and segments[0].startswith("\n"):
            segments[0] = segments[0][1:]
        if indent:
            segments = [self._dedent(s, indent, i == 0 and starts_at_open)
                        for i, s in enumerate(segments)]
        return segments

    @staticmethod
    def _dedent(segment: str, indent: str, at_line_start: bool) -> str:
        """Remove the closing delimiter's indentation from each line of a segment."""
        lines = segment.split("\n")
        for i, line in enumerate(lines):
            if (i > 0 or at_line_start) and line.startswith(indent):
                lines[i] = line[len(indent):]
        return "\n".join(lines)

    @staticmethod
    def _first_error_line(root) -> int:
        cursor = root.walk()
        while True:
            node = cursor.node
            if node.type == "ERROR" or node.is_missing:
                return node.start_point[0] + 1
            if node.has_error and cursor.goto_first_child():
                continue
            while not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    return root.start_point[0] + 1
