"""Line extraction from a flattened inline stream."""

import re
from typing import Iterable, Optional

from glossa.formatting.ir import Break, Inline, Line, RichSpan, Span, TextSpan, Word


class LineExtractor:
    """Split inline content into logical lines of words.

    A ``Break`` or a newline inside text starts a new line. Whitespace
    inside text separates words and is dropped. Rich spans are never
    split; they join whichever word is open when they appear.
    """

    WHITESPACE_PATTERN = re.compile(r"\s+")

    def extract(self, inlines: Iterable[Inline]) -> tuple[Line, ...]:
        """Convert an inline stream into lines.

        Args:
            inlines: Text spans, rich spans and breaks in source order

        Returns:
            Non-empty lines of non-empty words, in source order
        """
        lines: list[list[list[Span]]] = [[[]]]
        starts: list[Optional[int]] = [None]

        def start_line() -> None:
            lines.append([[]])
            starts.append(None)

        def append(span: Span) -> None:
            lines[-1][-1].append(span)
            if starts[-1] is None:
                starts[-1] = span.line

        for node in inlines:
            if isinstance(node, Break):
                start_line()
            elif isinstance(node, TextSpan):
                for offset, fragment in enumerate(node.text.split("\n")):
                    if offset:
                        start_line()
                    line_no = None if node.line is None else node.line + offset
                    parts = self.WHITESPACE_PATTERN.split(fragment)
                    for position, part in enumerate(parts):
                        if position:
                            lines[-1].append([])
                        if part:
                            append(TextSpan(part, line=line_no))
            elif isinstance(node, RichSpan):
                append(node)
            else:
                raise TypeError(f"Unsupported inline node: {node!r}")

        result: list[Line] = []
        for words, start in zip(lines, starts):
            kept = tuple(Word(spans=tuple(spans)) for spans in words if spans)
            if kept:
                result.append(Line(words=kept, line=start))
        return tuple(result)


def extract_lines(inlines: Iterable[Inline]) -> tuple[Line, ...]:
    """Convenience wrapper around ``LineExtractor().extract``."""
    return LineExtractor().extract(inlines)
