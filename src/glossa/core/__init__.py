"""Core gloss assembly and transformation logic."""

from glossa.core.assembler import GlossAssembler, StructuralError, assemble_gloss
from glossa.core.columns import ColumnBuilder, build_columns
from glossa.core.transformer import (
    GlossTransformer,
    NoGlossBlocksError,
    TransformationError,
)

__all__ = [
    "GlossAssembler",
    "StructuralError",
    "assemble_gloss",
    "ColumnBuilder",
    "build_columns",
    "GlossTransformer",
    "TransformationError",
    "NoGlossBlocksError",
]
