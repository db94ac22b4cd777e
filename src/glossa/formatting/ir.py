"""Intermediate Representation for interlinear glosses.

This module defines the data structures that flow through the gloss
pipeline: inline spans from the host document, the words and lines
derived from them, the assembled gloss and its column-major table.

Every structure is immutable. Each stage builds new values from the
previous stage's output and never patches them in place.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Callable, Optional, Union


class TextStyle(Flag):
    """Inline styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    CODE = auto()
    LINK = auto()


@dataclass(frozen=True)
class TextSpan:
    """Plain text from the host document.

    Attributes:
        text: The text content (may contain whitespace and newlines
            before line extraction, never after)
        line: 1-based source line where the text starts, if known
    """

    text: str
    line: Optional[int] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RichSpan:
    """Rich inline content (emphasis, code, links), kept as one token.

    Attributes:
        text: The visible text
        style: Combined style flags
        url: Link target, for LINK spans
        line: 1-based source line, if known
    """

    text: str
    style: TextStyle = TextStyle.NONE
    url: Optional[str] = None
    line: Optional[int] = field(default=None, compare=False)

    @property
    def bold(self) -> bool:
        """Check if this span is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this span is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def code(self) -> bool:
        """Check if this span is inline code."""
        return TextStyle.CODE in self.style

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Break:
    """Explicit line-break marker in the inline stream."""

    line: Optional[int] = field(default=None, compare=False)


Span = Union[TextSpan, RichSpan]
Inline = Union[TextSpan, RichSpan, Break]


def spans_text(spans: tuple[Span, ...]) -> str:
    """Join the visible text of a span sequence."""
    return "".join(span.text for span in spans)


class Role(str, Enum):
    """Role of a gloss line, assigned from its leading marker."""

    TEXT = "text"
    TRANSLITERATION = "transliteration"
    GLOSS = "gloss"
    META = "meta"


@dataclass(frozen=True)
class Word:
    """A whitespace-free run of spans."""

    spans: tuple[Span, ...] = ()

    @property
    def plain_text(self) -> str:
        return spans_text(self.spans)

    def __str__(self) -> str:
        return self.plain_text


@dataclass(frozen=True)
class Line:
    """One logical line of a gloss block, before classification.

    Attributes:
        words: Words in source order
        line: 1-based source line of the line's first content, if known
    """

    words: tuple[Word, ...]
    line: Optional[int] = field(default=None, compare=False)

    @property
    def plain_text(self) -> str:
        return " ".join(word.plain_text for word in self.words)


@dataclass(frozen=True)
class Row:
    """A classified alignment row (text, transliteration or gloss)."""

    role: Role
    words: tuple[Word, ...]
    line: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.role is Role.META:
            raise ValueError("Meta lines are captions, not alignment rows")


@dataclass(frozen=True)
class MetaLine:
    """A classified caption line, flattened to prose spans."""

    spans: tuple[Span, ...]
    line: Optional[int] = field(default=None, compare=False)

    @property
    def role(self) -> Role:
        return Role.META

    @property
    def plain_text(self) -> str:
        return spans_text(self.spans)


ClassifiedLine = Union[Row, MetaLine]


@dataclass(frozen=True)
class Gloss:
    """The assembled gloss for one block.

    Attributes:
        header: Caption spans from a leading meta line
        rows: Alignment rows in source order
        footer: Caption spans from a trailing meta line
    """

    header: Optional[tuple[Span, ...]] = None
    rows: tuple[Row, ...] = ()
    footer: Optional[tuple[Span, ...]] = None


@dataclass(frozen=True)
class Cell:
    """One row's entry in a column. ``word`` is None when absent."""

    role: Role
    word: Optional[Word] = None

    @property
    def is_absent(self) -> bool:
        return self.word is None


@dataclass(frozen=True)
class Column:
    """One aligned word position across all rows, in row order."""

    index: int
    cells: tuple[Cell, ...]


@dataclass(frozen=True)
class GlossTable:
    """Column-major view of a gloss, ready for rendering.

    Attributes:
        header: Caption spans, if any
        columns: Aligned columns
        footer: Footer spans, if any
        row_roles: Role of each row, in row order
    """

    header: Optional[tuple[Span, ...]]
    columns: tuple[Column, ...]
    footer: Optional[tuple[Span, ...]]
    row_roles: tuple[Role, ...] = ()

    @property
    def width(self) -> int:
        return len(self.columns)

    def rows(self) -> list[list[Cell]]:
        """Transpose back to row-major cells (for row-based renderers)."""
        return [
            [column.cells[i] for column in self.columns]
            for i in range(len(self.row_roles))
        ]


# =============================================================================
# Host document
# =============================================================================

@dataclass(frozen=True)
class GlossBlock:
    """A gloss container found in a host document.

    Attributes:
        index: Position of the block among the document's gloss blocks
        inlines: Inline content, with explicit breaks
        start_line: 1-based line of the opening fence
        end_line: 1-based line of the closing fence (or last line)
    """

    index: int
    inlines: tuple[Inline, ...]
    start_line: int
    end_line: int


@dataclass(frozen=True)
class SourceDocument:
    """A parsed host document: its raw lines plus the gloss blocks in it."""

    lines: tuple[str, ...]
    blocks: tuple[GlossBlock, ...] = ()
    source: str = "<string>"

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem reported for one block.

    Attributes:
        message: Human-readable description
        line: 1-based source line of the offending content
        column: 1-based source column
        block_index: Index of the block that failed
        source: Name of the document the block came from
    """

    message: str
    line: Optional[int] = None
    column: int = 1
    block_index: Optional[int] = None
    source: str = "<string>"

    def __str__(self) -> str:
        location = f"{self.source}:{self.line or 0}:{self.column}"
        return f"{location}: warning: {self.message}"


@dataclass(frozen=True)
class BlockResult:
    """Outcome of processing one gloss block: a table or a diagnostic."""

    block: GlossBlock
    table: Optional[GlossTable] = None
    diagnostic: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.table is not None


@dataclass(frozen=True)
class GlossDocument:
    """A host document together with the result of every gloss block."""

    document: SourceDocument
    results: tuple[BlockResult, ...] = ()

    @property
    def tables(self) -> list[GlossTable]:
        return [result.table for result in self.results if result.table is not None]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [
            result.diagnostic
            for result in self.results
            if result.diagnostic is not None
        ]

    def substitute(self, render: Callable[[GlossTable], str]) -> str:
        """Rebuild the source text with each built block replaced.

        Blocks that failed are left exactly as written.
        """
        lines = list(self.document.lines)
        # Replace from the bottom up so earlier line numbers stay valid
        for result in sorted(
            self.results, key=lambda r: r.block.start_line, reverse=True
        ):
            if result.table is None:
                continue
            start = result.block.start_line - 1
            lines[start : result.block.end_line] = [render(result.table)]
        return "\n".join(lines)
