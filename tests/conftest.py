"""Pytest fixtures for Glossa tests."""

import pytest
from pathlib import Path

from glossa.core.transformer import GlossTransformer
from glossa.formatting.ir import GlossTable, TextSpan


@pytest.fixture
def sample_source() -> str:
    """Markdown with a good gloss, a malformed gloss and another good one."""
    return """# Field notes

:::gloss
| A caption
The dog runs
/ le chien court
= the dog run-3SG
:::

:::gloss
The dog
| misplaced
= a
:::

Some prose between glosses.

:::gloss
The **dog** runs
= the dog
| trailing note
:::
"""


@pytest.fixture
def transformer() -> GlossTransformer:
    """Create a transformer with default settings."""
    return GlossTransformer(directive_name="gloss", class_prefix="gloss")


@pytest.fixture
def build(transformer: GlossTransformer):
    """Build a table from plain source lines of one gloss block."""

    def _build(*lines: str) -> GlossTable:
        return transformer.build_table([TextSpan("\n".join(lines))])

    return _build


@pytest.fixture
def tmp_source_file(tmp_path: Path, sample_source: str) -> Path:
    """Create a temporary markdown file holding the sample source."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_source, encoding="utf-8")
    return file_path
