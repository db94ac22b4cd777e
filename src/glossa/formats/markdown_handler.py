"""Markdown output: the source with gloss blocks replaced by HTML."""

from glossa.formats.base import TextFormatHandler
from glossa.formats.html_handler import render_gloss_html
from glossa.formatting.ir import GlossDocument


class MarkdownHandler(TextFormatHandler):
    """Handler for markdown (.md) files.

    Each successfully built gloss block is swapped for its HTML fragment
    at the block's original position. Markdown renderers pass raw HTML
    through, so the result can go straight back into a site build.
    Blocks that failed are kept as written.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md", ".markdown")

    def render(self, document: GlossDocument) -> str:
        return document.substitute(
            lambda table: render_gloss_html(table, self.class_prefix)
        )
