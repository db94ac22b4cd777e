"""Markdown source parser: finds gloss directive blocks and tokenizes them."""

import logging
import re
from typing import Optional

from glossa.formatting.ir import (
    Break,
    GlossBlock,
    Inline,
    RichSpan,
    SourceDocument,
    TextSpan,
    TextStyle,
)

logger = logging.getLogger(__name__)

# (text, style, url) as produced by the inline tokenizer
Segment = tuple[str, TextStyle, Optional[str]]


class GlossSourceParser:
    """Parse markdown text into a ``SourceDocument``.

    Gloss blocks are container directives::

        :::gloss
        | A caption
        The dog runs
        / le chien court
        = the dog run-3SG
        :::

    Everything outside such blocks is kept verbatim so rendered
    fragments can be substituted back in place.
    """

    CLOSE_PATTERN = re.compile(r"^ {0,3}:{3,}\s*$")

    # A trailing backslash or two spaces forces a hard line break
    HARD_BREAK_PATTERN = re.compile(r"(\\| {2,})$")

    # Directives inside fenced code are example text, not glosses
    FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")

    INLINE_MARKERS = "*_`["

    def __init__(self, directive_name: str = "gloss") -> None:
        self.directive_name = directive_name
        self.open_pattern = re.compile(
            r"^ {0,3}:{3,}\s*" + re.escape(directive_name)
            + r"(\[[^\]]*\])?(\{[^}]*\})?\s*$"
        )

    def parse(self, text: str, source: str = "<string>") -> SourceDocument:
        """Split source text into raw lines and gloss blocks.

        Args:
            text: The markdown source
            source: Name used in diagnostics (usually the file path)

        Returns:
            SourceDocument with the gloss blocks found in ``text``
        """
        lines = text.split("\n")
        blocks: list[GlossBlock] = []
        pos = 0
        fence: Optional[str] = None

        while pos < len(lines):
            fence_match = self.FENCE_PATTERN.match(lines[pos])
            if fence is not None:
                if self._closes_fence(lines[pos], fence_match, fence):
                    fence = None
                pos += 1
                continue
            if fence_match:
                fence = fence_match.group(1)
                pos += 1
                continue

            if not self.open_pattern.match(lines[pos]):
                pos += 1
                continue

            start = pos
            end = pos + 1
            while end < len(lines) and not self.CLOSE_PATTERN.match(lines[end]):
                end += 1
            if end >= len(lines):
                logger.warning(
                    "%s:%d: unclosed :::%s block runs to end of document",
                    source, start + 1, self.directive_name,
                )
                end = len(lines) - 1
                body = lines[start + 1:]
            else:
                body = lines[start + 1:end]

            blocks.append(
                GlossBlock(
                    index=len(blocks),
                    inlines=self.parse_block_body(body, first_line=start + 2),
                    start_line=start + 1,
                    end_line=end + 1,
                )
            )
            pos = end + 1

        logger.debug("%s: found %d gloss block(s)", source, len(blocks))
        return SourceDocument(lines=tuple(lines), blocks=tuple(blocks), source=source)

    @staticmethod
    def _closes_fence(
        line: str, fence_match: Optional[re.Match], fence: str
    ) -> bool:
        """Check whether a line closes the open code fence."""
        if fence_match is None:
            return False
        marker = fence_match.group(1)
        return (
            marker[0] == fence[0]
            and len(marker) >= len(fence)
            and not line[fence_match.end():].strip()
        )

    @staticmethod
    def _is_flanked(content: str) -> bool:
        """Emphasis content must not start or end with whitespace."""
        return bool(content) and not content[0].isspace() and not content[-1].isspace()

    def parse_block_body(
        self, body: list[str], first_line: int = 1
    ) -> tuple[Inline, ...]:
        """Tokenize the lines inside a gloss block into an inline stream.

        Source lines are joined by soft breaks (a newline in text);
        hard-break lines emit an explicit ``Break`` instead.
        """
        inlines: list[Inline] = []

        for offset, raw in enumerate(body):
            line_no = first_line + offset
            hard_break = self.HARD_BREAK_PATTERN.search(raw)
            content = raw[: hard_break.start()] if hard_break else raw

            inlines.extend(self.parse_inline(content, line=line_no))

            if offset == len(body) - 1:
                break
            if hard_break:
                inlines.append(Break(line=line_no))
            else:
                inlines.append(TextSpan("\n", line=line_no))

        return tuple(inlines)

    def parse_inline(self, text: str, line: Optional[int] = None) -> list[Inline]:
        """Parse one source line into text and rich spans."""
        spans: list[Inline] = []
        for segment_text, style, url in self._tokenize_markdown(text):
            if not segment_text:
                continue
            if style == TextStyle.NONE:
                previous = spans[-1] if spans else None
                if isinstance(previous, TextSpan):
                    spans[-1] = TextSpan(previous.text + segment_text, line=line)
                else:
                    spans.append(TextSpan(segment_text, line=line))
            else:
                spans.append(RichSpan(segment_text, style=style, url=url, line=line))
        return spans

    def _tokenize_markdown(self, text: str) -> list[Segment]:
        """Tokenize markdown into (text, style, url) triples.

        Handles:
        - ***bold italic***
        - **bold**
        - *italic* and _italic_
        - `code`
        - [link](url)
        - plain text
        """
        segments: list[Segment] = []
        pos = 0

        while pos < len(text):
            # Check for inline code
            if text[pos] == "`":
                end = text.find("`", pos + 1)
                if end != -1:
                    segments.append((text[pos + 1 : end], TextStyle.CODE, None))
                    pos = end + 1
                    continue

            # Check for link
            if text[pos] == "[":
                label_end = text.find("](", pos + 1)
                # The label ends at the first "]"; a later "](" belongs to another link
                if label_end != -1 and text.find("]", pos + 1) != label_end:
                    label_end = -1
                url_end = text.find(")", label_end + 2) if label_end != -1 else -1
                if url_end != -1:
                    segments.append((
                        text[pos + 1 : label_end],
                        TextStyle.LINK,
                        text[label_end + 2 : url_end].strip(),
                    ))
                    pos = url_end + 1
                    continue

            # Check for bold-italic (***)
            if text[pos : pos + 3] == "***":
                end = text.find("***", pos + 3)
                if end != -1 and self._is_flanked(text[pos + 3 : end]):
                    segments.append((
                        text[pos + 3 : end],
                        TextStyle.BOLD | TextStyle.ITALIC,
                        None,
                    ))
                    pos = end + 3
                    continue

            # Check for bold (**)
            if text[pos : pos + 2] == "**":
                end = text.find("**", pos + 2)
                if end != -1 and self._is_flanked(text[pos + 2 : end]):
                    segments.append((text[pos + 2 : end], TextStyle.BOLD, None))
                    pos = end + 2
                    continue

            # Check for italic (*)
            if text[pos] == "*" and (pos + 1 < len(text) and text[pos + 1] != "*"):
                end = pos + 1
                while end < len(text):
                    if text[end] == "*" and (
                        end + 1 >= len(text) or text[end + 1] != "*"
                    ):
                        break
                    end += 1
                if end < len(text) and self._is_flanked(text[pos + 1 : end]):
                    segments.append((text[pos + 1 : end], TextStyle.ITALIC, None))
                    pos = end + 1
                    continue

            # Check for italic (_), only at word boundaries
            if text[pos] == "_" and (pos == 0 or not text[pos - 1].isalnum()):
                end = text.find("_", pos + 1)
                while end != -1 and end + 1 < len(text) and text[end + 1].isalnum():
                    end = text.find("_", end + 1)
                if end != -1 and self._is_flanked(text[pos + 1 : end]):
                    segments.append((text[pos + 1 : end], TextStyle.ITALIC, None))
                    pos = end + 1
                    continue

            # Plain text - find next formatting marker
            next_marker = len(text)
            for marker in self.INLINE_MARKERS:
                idx = text.find(marker, pos + 1)
                if idx != -1 and idx < next_marker:
                    next_marker = idx

            segments.append((text[pos:next_marker], TextStyle.NONE, None))
            pos = next_marker

        return segments
