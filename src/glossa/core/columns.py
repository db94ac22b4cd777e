"""Row-to-column transposition for aligned rendering."""

from typing import Sequence

from glossa.formatting.ir import Cell, Column, Gloss, GlossTable, Row


class ColumnBuilder:
    """Transpose gloss rows into columns.

    The column count is the longest row's word count. Shorter rows get
    absent cells (``Cell.word is None``) past their last word.
    """

    def build(self, rows: Sequence[Row]) -> tuple[Column, ...]:
        width = max((len(row.words) for row in rows), default=0)
        return tuple(
            Column(
                index=j,
                cells=tuple(
                    Cell(row.role, row.words[j] if j < len(row.words) else None)
                    for row in rows
                ),
            )
            for j in range(width)
        )

    def build_table(self, gloss: Gloss) -> GlossTable:
        """Build the renderable table for an assembled gloss."""
        return GlossTable(
            header=gloss.header,
            columns=self.build(gloss.rows),
            footer=gloss.footer,
            row_roles=tuple(row.role for row in gloss.rows),
        )


def build_columns(rows: Sequence[Row]) -> tuple[Column, ...]:
    """Convenience wrapper around ``ColumnBuilder().build``."""
    return ColumnBuilder().build(rows)
