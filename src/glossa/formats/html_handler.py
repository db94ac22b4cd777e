"""HTML output: gloss fragments as aligned column grids."""

from html import escape
from typing import Optional

from glossa.formats.base import TextFormatHandler
from glossa.formatting.ir import (
    GlossDocument,
    GlossTable,
    RichSpan,
    Span,
    TextStyle,
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
.{p} {{ margin: 1.5em 0; }}
.{p}__body {{ display: flex; flex-wrap: wrap; column-gap: 1em; }}
.{p}__column {{ display: flex; flex-direction: column; }}
.{p}__cell:empty::before {{ content: "\\00a0"; }}
.{p}__cell--transliteration {{ font-style: italic; }}
.{p}__footer {{ font-style: italic; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def render_span_html(span: Span) -> str:
    """Render one span, wrapping rich spans in their tags."""
    html = escape(span.text, quote=False)
    if not isinstance(span, RichSpan):
        return html
    if TextStyle.CODE in span.style:
        html = f"<code>{html}</code>"
    if span.italic:
        html = f"<em>{html}</em>"
    if span.bold:
        html = f"<strong>{html}</strong>"
    if TextStyle.LINK in span.style:
        html = f'<a href="{escape(span.url or "")}">{html}</a>'
    return html


def render_spans_html(spans: Optional[tuple[Span, ...]]) -> str:
    return "".join(render_span_html(span) for span in spans or ())


def render_gloss_html(table: GlossTable, class_prefix: str = "gloss") -> str:
    """Render one gloss as a self-contained HTML fragment.

    Structure: optional header paragraph, a body of columns, each
    holding one cell per row tagged by role, optional footer paragraph.
    Absent cells render as empty spans.
    """
    p = class_prefix
    parts = [f'<div class="{p}">']
    if table.header is not None:
        parts.append(f'<p class="{p}__header">{render_spans_html(table.header)}</p>')

    parts.append(f'<div class="{p}__body">')
    for column in table.columns:
        parts.append(f'<div class="{p}__column">')
        for cell in column.cells:
            content = "" if cell.word is None else render_spans_html(cell.word.spans)
            parts.append(
                f'<span class="{p}__cell {p}__cell--{cell.role.value}">{content}</span>'
            )
        parts.append("</div>")
    parts.append("</div>")

    if table.footer is not None:
        parts.append(f'<p class="{p}__footer">{render_spans_html(table.footer)}</p>')
    parts.append("</div>")
    return "\n".join(parts)


class HTMLHandler(TextFormatHandler):
    """Handler for standalone HTML pages (.html).

    The page holds every successfully built gloss, in document order,
    with a small stylesheet that lays the columns out side by side.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    def render(self, document: GlossDocument) -> str:
        body = "\n".join(
            render_gloss_html(table, self.class_prefix) for table in document.tables
        )
        return PAGE_TEMPLATE.format(
            title=escape(document.document.source),
            p=self.class_prefix,
            body=body,
        )
