"""Microsoft Word (.docx) output handler."""

from pathlib import Path

from docx import Document
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.shared import Pt, RGBColor

from glossa.formats.base import FormatHandler
from glossa.formatting.ir import (
    GlossDocument,
    GlossTable,
    RichSpan,
    Role,
    Span,
    TextStyle,
)

CODE_FONT = "Consolas"
LINK_COLOR = RGBColor(25, 118, 210)  # Blue

# Roles rendered in italics by linguistic convention
ITALIC_ROLES = {Role.TRANSLITERATION}


class DOCXHandler(FormatHandler):
    """Handler for Microsoft Word (.docx) files.

    Each gloss becomes a caption paragraph, a borderless table with one
    row per tier and one column per aligned word, and a footer paragraph.
    Uses python-docx with run-level bold and italic formatting.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def write(self, document: GlossDocument, path: Path) -> None:
        doc = Document()

        style = doc.styles["Normal"]
        font = style.font
        font.name = "Calibri"
        font.size = Pt(11)

        for table in document.tables:
            self._add_gloss(doc, table)
            doc.add_paragraph()  # Spacing between glosses

        doc.save(path)

    def _add_gloss(self, doc: Document, table: GlossTable) -> None:
        """Add one gloss to the document."""
        if table.header is not None:
            self._add_spans(doc.add_paragraph(), table.header)

        if table.width and table.row_roles:
            grid = doc.add_table(rows=len(table.row_roles), cols=table.width)
            grid.alignment = WD_TABLE_ALIGNMENT.LEFT
            grid.autofit = True
            for i, row in enumerate(table.rows()):
                for j, cell in enumerate(row):
                    if cell.word is None:
                        continue
                    self._add_spans(
                        grid.cell(i, j).paragraphs[0],
                        cell.word.spans,
                        italic=cell.role in ITALIC_ROLES,
                    )

        if table.footer is not None:
            para = doc.add_paragraph()
            self._add_spans(para, table.footer, italic=True)

    def _add_spans(self, para, spans: tuple[Span, ...], italic: bool = False) -> None:
        """Append spans to a paragraph as styled runs."""
        for span in spans:
            run = para.add_run(span.text)
            run.italic = italic or None
            if isinstance(span, RichSpan):
                run.bold = span.bold
                run.italic = span.italic or italic
                if TextStyle.CODE in span.style:
                    run.font.name = CODE_FONT
                if TextStyle.LINK in span.style:
                    run.underline = True
                    run.font.color.rgb = LINK_COLOR
