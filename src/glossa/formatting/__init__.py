"""Formatting utilities: the gloss IR, source parsing and line handling."""

from glossa.formatting.ir import (
    TextStyle,
    TextSpan,
    RichSpan,
    Break,
    Role,
    Word,
    Line,
    Row,
    MetaLine,
    Gloss,
    Cell,
    Column,
    GlossTable,
    GlossBlock,
    SourceDocument,
    Diagnostic,
    BlockResult,
    GlossDocument,
)
from glossa.formatting.parser import GlossSourceParser
from glossa.formatting.lines import LineExtractor, extract_lines
from glossa.formatting.classifier import LinePrefixClassifier, classify_line

__all__ = [
    "TextStyle",
    "TextSpan",
    "RichSpan",
    "Break",
    "Role",
    "Word",
    "Line",
    "Row",
    "MetaLine",
    "Gloss",
    "Cell",
    "Column",
    "GlossTable",
    "GlossBlock",
    "SourceDocument",
    "Diagnostic",
    "BlockResult",
    "GlossDocument",
    "GlossSourceParser",
    "LineExtractor",
    "extract_lines",
    "LinePrefixClassifier",
    "classify_line",
]
