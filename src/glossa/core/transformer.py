"""Main gloss transformation orchestrator."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from glossa.config import get_settings
from glossa.core.assembler import GlossAssembler, StructuralError
from glossa.core.columns import ColumnBuilder
from glossa.formats import SUPPORTED_EXTENSIONS, get_handler
from glossa.formatting.classifier import LinePrefixClassifier
from glossa.formatting.ir import (
    BlockResult,
    Diagnostic,
    Gloss,
    GlossBlock,
    GlossDocument,
    GlossTable,
    Inline,
)
from glossa.formatting.lines import LineExtractor
from glossa.formatting.parser import GlossSourceParser

logger = logging.getLogger(__name__)


class TransformationError(Exception):
    """Error during document transformation."""

    pass


class NoGlossBlocksError(TransformationError):
    """The input holds no gloss blocks."""

    pass


class GlossTransformer:
    """Orchestrates the gloss pipeline.

    Pipeline:
    1. Parse the source document and find gloss blocks
    2. Extract lines of words from each block's inline content
    3. Classify each line by its leading marker
    4. Assemble header, rows and footer
    5. Transpose rows into columns
    6. Write the results with the handler for the output format

    Each block is processed independently. A block that fails assembly
    produces a diagnostic and no table; the others are unaffected.
    """

    def __init__(
        self,
        directive_name: Optional[str] = None,
        class_prefix: Optional[str] = None,
    ) -> None:
        """Initialize the transformer.

        Args:
            directive_name: Container directive name (default from settings)
            class_prefix: CSS class prefix for HTML output
        """
        settings = get_settings()
        self.directive_name = directive_name or settings.directive_name
        self.class_prefix = class_prefix or settings.class_prefix

        self.parser = GlossSourceParser(directive_name=self.directive_name)
        self.extractor = LineExtractor()
        self.classifier = LinePrefixClassifier()
        self.assembler = GlossAssembler()
        self.column_builder = ColumnBuilder()

    def build_gloss(self, inlines: Iterable[Inline]) -> Gloss:
        """Run line extraction, classification and assembly.

        Raises:
            StructuralError: If a meta line is misplaced
        """
        lines = self.extractor.extract(inlines)
        classified = [self.classifier.classify(line) for line in lines]
        return self.assembler.assemble(classified)

    def build_table(self, inlines: Iterable[Inline]) -> GlossTable:
        """Run the whole pipeline for one block's inline content.

        Raises:
            StructuralError: If a meta line is misplaced
        """
        return self.column_builder.build_table(self.build_gloss(inlines))

    def transform_block(
        self, block: GlossBlock, source: str = "<string>"
    ) -> BlockResult:
        """Build one block, turning structural failures into a diagnostic."""
        try:
            table = self.build_table(block.inlines)
        except StructuralError as e:
            diagnostic = Diagnostic(
                message=str(e),
                line=e.line if e.line is not None else block.start_line,
                block_index=block.index,
                source=source,
            )
            logger.info("Block %d failed: %s", block.index, diagnostic)
            return BlockResult(block=block, diagnostic=diagnostic)
        return BlockResult(block=block, table=table)

    def transform_text(self, text: str, source: str = "<string>") -> GlossDocument:
        """Transform every gloss block in a source text.

        Args:
            text: Markdown source containing gloss directives
            source: Name used in diagnostics

        Returns:
            GlossDocument holding the source and one result per block
        """
        document = self.parser.parse(text, source=source)
        results = tuple(
            self.transform_block(block, source=source) for block in document.blocks
        )
        logger.info(
            "%s: %d gloss block(s), %d failed",
            source, len(results), sum(1 for r in results if not r.ok),
        )
        return GlossDocument(document=document, results=results)

    def transform_file(self, input_path: Path, output_path: Path) -> GlossDocument:
        """Transform a source file and write the result.

        Args:
            input_path: Path to a markdown source file
            output_path: Path for the output; its extension picks the format

        Returns:
            The GlossDocument that was written

        Raises:
            TransformationError: If the input is missing or the output format
                is unsupported
            NoGlossBlocksError: If the input is empty or holds no gloss blocks
        """
        if not input_path.exists():
            raise TransformationError(f"Input file not found: {input_path}")

        ext = output_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise TransformationError(
                f"Unsupported output format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        text = input_path.read_text(encoding="utf-8")
        if not text.strip():
            raise NoGlossBlocksError("Input file contains no text")

        result = self.transform_text(text, source=str(input_path))
        if not result.results:
            raise NoGlossBlocksError(
                f"No :::{self.directive_name} blocks found in {input_path}"
            )

        handler = get_handler(ext)(class_prefix=self.class_prefix)
        handler.write(result, output_path)
        return result
