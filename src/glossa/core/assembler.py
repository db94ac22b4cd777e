"""Gloss assembly: header, rows and footer from classified lines."""

import logging
from typing import Optional, Sequence

from glossa.formatting.ir import ClassifiedLine, Gloss, MetaLine, Row, Span

logger = logging.getLogger(__name__)


class StructuralError(ValueError):
    """A meta line appeared somewhere other than first or last.

    Attributes:
        index: Position of the offending line within the block
        line: 1-based source line of the offending line, if known
    """

    def __init__(self, index: int, line: Optional[int] = None) -> None:
        self.index = index
        self.line = line
        super().__init__(
            f"Meta line at position {index} must be the first or last line of a gloss"
        )


class GlossAssembler:
    """Group classified lines into a ``Gloss``.

    A meta line at index 0 is the header. Otherwise a meta line at the
    last index (of two or more lines) is the footer. A single-line block
    made of one meta line therefore yields a header, not a footer.
    """

    def assemble(self, lines: Sequence[ClassifiedLine]) -> Gloss:
        """Build the gloss for one block.

        Raises:
            StructuralError: If a meta line is neither first nor last
        """
        header: Optional[tuple[Span, ...]] = None
        footer: Optional[tuple[Span, ...]] = None
        rows: list[Row] = []
        last = len(lines) - 1

        for index, line in enumerate(lines):
            if isinstance(line, MetaLine):
                if index == 0:
                    header = line.spans
                elif index == last:
                    footer = line.spans
                else:
                    raise StructuralError(index, line.line)
            else:
                rows.append(line)

        logger.debug(
            "Assembled gloss: %d rows, header=%s, footer=%s",
            len(rows), header is not None, footer is not None,
        )
        return Gloss(header=header, rows=tuple(rows), footer=footer)


def assemble_gloss(lines: Sequence[ClassifiedLine]) -> Gloss:
    """Convenience wrapper around ``GlossAssembler().assemble``."""
    return GlossAssembler().assemble(lines)
