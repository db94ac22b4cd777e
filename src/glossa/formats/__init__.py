"""Output format handlers for Glossa."""

from glossa.formats.base import FormatHandler, TextFormatHandler
from glossa.formats.html_handler import HTMLHandler
from glossa.formats.markdown_handler import MarkdownHandler
from glossa.formats.txt_handler import TXTHandler
from glossa.formats.docx_handler import DOCXHandler

__all__ = [
    "FormatHandler",
    "TextFormatHandler",
    "HTMLHandler",
    "MarkdownHandler",
    "TXTHandler",
    "DOCXHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".html": HTMLHandler,
    ".htm": HTMLHandler,
    ".md": MarkdownHandler,
    ".markdown": MarkdownHandler,
    ".txt": TXTHandler,
    ".docx": DOCXHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
