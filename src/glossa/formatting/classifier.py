"""Line role classification from a leading marker character."""

import re

from glossa.formatting.ir import (
    ClassifiedLine,
    Line,
    MetaLine,
    Role,
    Row,
    Span,
    TextSpan,
    Word,
)


class LinePrefixClassifier:
    """Assign a role to a line and strip its marker.

    Markers are recognised only at the very start of the line's first
    span, and only when that span is plain text:

    - ``|`` meta (caption) line
    - ``/`` transliteration row
    - ``=`` gloss row
    - anything else: text row, left unchanged
    """

    MARKER_PATTERN = re.compile(r"^([|/=])\s*")

    MARKER_ROLES = {
        "|": Role.META,
        "/": Role.TRANSLITERATION,
        "=": Role.GLOSS,
    }

    # Meta words are joined back into prose with this separator
    META_SEPARATOR = " "

    def classify(self, line: Line) -> ClassifiedLine:
        """Classify one line.

        Returns:
            A ``MetaLine`` with flattened spans for captions, otherwise a
            ``Row`` holding the (possibly trimmed) words
        """
        words = line.words
        role = Role.TEXT

        first_span = words[0].spans[0] if words and words[0].spans else None
        if isinstance(first_span, TextSpan):
            match = self.MARKER_PATTERN.match(first_span.text)
            if match:
                role = self.MARKER_ROLES[match.group(1)]
                words = self._strip_marker(words, first_span, match.end())

        if role is Role.META:
            return MetaLine(spans=self._flatten(words, line), line=line.line)
        return Row(role=role, words=words, line=line.line)

    def _strip_marker(
        self, words: tuple[Word, ...], first_span: TextSpan, end: int
    ) -> tuple[Word, ...]:
        """Remove the marker from the first span, dropping what empties."""
        rest = first_span.text[end:]
        first_spans = words[0].spans[1:]
        if rest:
            first_spans = (TextSpan(rest, line=first_span.line),) + first_spans
        if not first_spans:
            return words[1:]
        return (Word(spans=first_spans),) + words[1:]

    def _flatten(self, words: tuple[Word, ...], line: Line) -> tuple[Span, ...]:
        spans: list[Span] = []
        for position, word in enumerate(words):
            if position:
                spans.append(TextSpan(self.META_SEPARATOR, line=line.line))
            spans.extend(word.spans)
        return tuple(spans)


def classify_line(line: Line) -> ClassifiedLine:
    """Convenience wrapper around ``LinePrefixClassifier().classify``."""
    return LinePrefixClassifier().classify(line)
