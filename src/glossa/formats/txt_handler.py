"""Plain text output handler."""

from glossa.formats.base import TextFormatHandler
from glossa.formatting.ir import GlossDocument, GlossTable, spans_text


def render_gloss_text(table: GlossTable, gap: int = 2) -> str:
    """Render one gloss as column-aligned plain text.

    Every word is padded to its column's widest word. Styling is dropped
    so that padding lines up in any text editor.
    """
    widths = [
        max(
            (len(cell.word.plain_text) for cell in column.cells if cell.word is not None),
            default=0,
        )
        for column in table.columns
    ]

    lines: list[str] = []
    if table.header is not None:
        lines.append(spans_text(table.header))

    for row in table.rows():
        words = [
            ("" if cell.word is None else cell.word.plain_text).ljust(width)
            for cell, width in zip(row, widths)
        ]
        lines.append((" " * gap).join(words).rstrip())

    if table.footer is not None:
        lines.append(spans_text(table.footer))
    return "\n".join(lines)


class TXTHandler(TextFormatHandler):
    """Handler for plain text (.txt) files.

    Glosses are written one per paragraph, separated by blank lines.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def render(self, document: GlossDocument) -> str:
        return "\n\n".join(render_gloss_text(table) for table in document.tables) + "\n"
