"""Tests for gloss assembly."""

import pytest

from glossa.core.assembler import GlossAssembler, StructuralError, assemble_gloss
from glossa.formatting.ir import Gloss, MetaLine, Role, Row, TextSpan, Word


def row(role: Role, *words: str) -> Row:
    return Row(role, tuple(Word((TextSpan(w),)) for w in words))


def meta(text: str, line=None) -> MetaLine:
    return MetaLine(spans=(TextSpan(text),), line=line)


class TestGlossAssembler:
    """Tests for the GlossAssembler class."""

    @pytest.fixture
    def assembler(self) -> GlossAssembler:
        return GlossAssembler()

    def test_header_rows_footer(self, assembler: GlossAssembler):
        """Test a block with a caption, rows and a footer."""
        rows = [row(Role.TEXT, "The", "dog"), row(Role.GLOSS, "the", "dog")]
        gloss = assembler.assemble([meta("Caption"), *rows, meta("Note")])

        assert gloss.header == (TextSpan("Caption"),)
        assert gloss.footer == (TextSpan("Note"),)
        assert gloss.rows == tuple(rows)

    def test_trailing_meta_is_footer(self, assembler: GlossAssembler):
        """Test that a last-line meta becomes the footer."""
        gloss = assembler.assemble([row(Role.TEXT, "a"), meta("Note")])

        assert gloss.header is None
        assert gloss.footer == (TextSpan("Note"),)

    def test_single_meta_line_is_header(self, assembler: GlossAssembler):
        """Test that a one-line meta block is a header, not a footer."""
        gloss = assembler.assemble([meta("Only a caption")])

        assert gloss == Gloss(header=(TextSpan("Only a caption"),))
        assert gloss.footer is None
        assert gloss.rows == ()

    def test_two_meta_lines(self, assembler: GlossAssembler):
        """Test a block holding only a header and a footer."""
        gloss = assembler.assemble([meta("Top"), meta("Bottom")])

        assert gloss.header == (TextSpan("Top"),)
        assert gloss.footer == (TextSpan("Bottom"),)
        assert gloss.rows == ()

    def test_interior_meta_fails(self, assembler: GlossAssembler):
        """Test that a meta line in the middle is a structural error."""
        lines = [
            row(Role.TEXT, "The", "dog"),
            meta("misplaced", line=12),
            row(Role.GLOSS, "a"),
            meta("trailing caption"),
        ]

        with pytest.raises(StructuralError) as excinfo:
            assembler.assemble(lines)

        assert excinfo.value.index == 1
        assert excinfo.value.line == 12
        assert "position 1" in str(excinfo.value)

    def test_structural_error_is_value_error(self):
        """Test that callers can catch the error as a ValueError."""
        with pytest.raises(ValueError):
            assemble_gloss([meta("a"), meta("b"), meta("c")])

    def test_rows_keep_source_order(self, assembler: GlossAssembler):
        """Test that rows are never regrouped by role."""
        rows = [
            row(Role.GLOSS, "x"),
            row(Role.TEXT, "y"),
            row(Role.TRANSLITERATION, "z"),
            row(Role.GLOSS, "w"),
        ]
        gloss = assembler.assemble(rows)

        assert [r.role for r in gloss.rows] == [
            Role.GLOSS, Role.TEXT, Role.TRANSLITERATION, Role.GLOSS,
        ]

    def test_empty_block(self, assembler: GlossAssembler):
        """Test that no lines give an empty gloss."""
        assert assembler.assemble([]) == Gloss()

    def test_row_cannot_be_meta(self):
        """Test that the meta role is reserved for caption lines."""
        with pytest.raises(ValueError):
            Row(Role.META, ())
