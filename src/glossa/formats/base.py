"""Abstract base class for gloss output handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from glossa.formatting.ir import GlossDocument


class FormatHandler(ABC):
    """Abstract base class for output format handlers.

    Each handler turns the built gloss tables of a document into one
    presentational format and writes it to disk.
    """

    def __init__(self, class_prefix: str = "gloss") -> None:
        self.class_prefix = class_prefix

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.html',))."""
        ...

    @abstractmethod
    def write(self, document: GlossDocument, path: Path) -> None:
        """Write the document's glosses to file.

        Args:
            document: The transformed document with one result per block
            path: Path to write the output to
        """
        ...


class TextFormatHandler(FormatHandler):
    """Base for handlers whose output is a single text file."""

    @abstractmethod
    def render(self, document: GlossDocument) -> str:
        """Render the document to text."""
        ...

    def write(self, document: GlossDocument, path: Path) -> None:
        path.write_text(self.render(document), encoding="utf-8")
