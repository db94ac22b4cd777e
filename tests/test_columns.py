"""Tests for column building and the end-to-end gloss scenarios."""

import pytest

from glossa.core.assembler import StructuralError
from glossa.core.columns import ColumnBuilder, build_columns
from glossa.formatting.ir import Role, Row, TextSpan, Word, spans_text


def row(role: Role, *words: str) -> Row:
    return Row(role, tuple(Word((TextSpan(w),)) for w in words))


class TestColumnBuilder:
    """Tests for the ColumnBuilder class."""

    @pytest.fixture
    def builder(self) -> ColumnBuilder:
        return ColumnBuilder()

    def test_no_rows_no_columns(self, builder: ColumnBuilder):
        """Test that an empty gloss has no columns."""
        assert builder.build([]) == ()

    @pytest.mark.parametrize(
        "lengths,expected",
        [([3, 3], 3), ([1, 4, 2], 4), ([0], 0), ([0, 2], 2)],
    )
    def test_column_count_is_longest_row(self, builder, lengths, expected):
        """Test the column count against the longest row."""
        rows = [row(Role.TEXT, *(f"w{i}" for i in range(n))) for n in lengths]

        assert len(builder.build(rows)) == expected

    def test_every_column_has_one_cell_per_row(self, builder: ColumnBuilder):
        """Test that cells follow row order in every column."""
        rows = [
            row(Role.TEXT, "a", "b"),
            row(Role.TRANSLITERATION, "c"),
            row(Role.GLOSS, "d", "e"),
        ]
        columns = builder.build(rows)

        assert [c.index for c in columns] == [0, 1]
        for column in columns:
            assert [cell.role for cell in column.cells] == [
                Role.TEXT, Role.TRANSLITERATION, Role.GLOSS,
            ]

    def test_short_rows_get_absent_cells(self, builder: ColumnBuilder):
        """Test that a missing word is absent, never moved."""
        columns = builder.build([row(Role.TEXT, "a", "b"), row(Role.GLOSS, "c")])

        assert columns[0].cells[1].word == Word((TextSpan("c"),))
        assert columns[1].cells[1].is_absent
        assert columns[1].cells[1].role is Role.GLOSS
        assert not columns[1].cells[0].is_absent

    def test_empty_word_is_not_absent(self, builder: ColumnBuilder):
        """Test that an empty word stays a present cell."""
        columns = builder.build([Row(Role.TEXT, (Word(()),))])

        assert columns[0].cells[0].word == Word(())
        assert not columns[0].cells[0].is_absent

    def test_deterministic(self):
        """Test that repeated builds give identical columns."""
        rows = [row(Role.TEXT, "a", "b"), row(Role.GLOSS, "c")]

        assert build_columns(rows) == build_columns(rows)


class TestGlossScenarios:
    """End-to-end scenarios from source lines to columns."""

    def test_caption_and_three_full_rows(self, build):
        """Test a captioned gloss where every row is complete."""
        table = build(
            "| A caption",
            "The dog runs",
            "/ le chien court",
            "= the dog run-3SG",
        )

        assert spans_text(table.header) == "A caption"
        assert table.footer is None
        assert table.row_roles == (Role.TEXT, Role.TRANSLITERATION, Role.GLOSS)
        assert table.width == 3
        assert all(not cell.is_absent for c in table.columns for cell in c.cells)
        assert [cell.word.plain_text for cell in table.columns[2].cells] == [
            "runs", "court", "run-3SG",
        ]

    def test_uneven_rows(self, build):
        """Test that a short gloss row leaves an absent cell."""
        table = build("The dog runs", "= the dog")

        assert table.row_roles == (Role.TEXT, Role.GLOSS)
        assert table.width == 3
        assert table.columns[2].cells[1].is_absent
        assert table.columns[2].cells[1].role is Role.GLOSS

    def test_interior_caption_fails(self, build):
        """Test that a misplaced caption aborts the block."""
        with pytest.raises(StructuralError) as excinfo:
            build("The dog", "| extra", "= a", "| trailing caption")

        assert excinfo.value.index == 1

    def test_caption_only(self, build):
        """Test a block with only a caption."""
        table = build("| Only a caption")

        assert spans_text(table.header) == "Only a caption"
        assert table.row_roles == ()
        assert table.columns == ()
        assert table.footer is None

    def test_bare_marker_row(self, build):
        """Test that a bare gloss marker is an empty row."""
        table = build("=")

        assert table.row_roles == (Role.GLOSS,)
        assert table.width == 0

    def test_rows_are_row_major_again(self, build):
        """Test transposing a table back to rows."""
        table = build("a b", "= c")
        rows = table.rows()

        assert [[cell.is_absent for cell in r] for r in rows] == [
            [False, False],
            [False, True],
        ]
