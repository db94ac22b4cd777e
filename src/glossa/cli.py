"""Command-line interface for Glossa."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from glossa import __version__
from glossa.config import get_settings
from glossa.core.transformer import (
    GlossTransformer,
    NoGlossBlocksError,
    TransformationError,
)
from glossa.formats import SUPPORTED_EXTENSIONS
from glossa.formatting.ir import GlossDocument, GlossTable, spans_text

app = typer.Typer(
    name="glossa",
    help="Render interlinear glosses in markdown documents as aligned tables.",
    add_completion=False,
)
console = Console()

SOURCE_EXTENSIONS = (".md", ".markdown")
OUTPUT_SUFFIX = "-gloss"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Glossa v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def generate_output_path(
    input_path: Path, extension: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate output path with -gloss suffix and the chosen extension."""
    output_name = f"{input_path.stem}{OUTPUT_SUFFIX}{extension}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def build_preview_table(table: GlossTable) -> Table:
    """Build a rich table showing one gloss, one line per tier."""
    preview = Table(
        title=spans_text(table.header) if table.header is not None else None,
        caption=spans_text(table.footer) if table.footer is not None else None,
        show_header=False,
    )
    preview.add_column("role", style="dim")
    for _ in table.columns:
        preview.add_column()
    for role, row in zip(table.row_roles, table.rows()):
        preview.add_row(
            role.value,
            *("" if cell.word is None else cell.word.plain_text for cell in row),
        )
    return preview


def report_diagnostics(document: GlossDocument) -> None:
    for diagnostic in document.diagnostics:
        console.print(f"[yellow]{diagnostic}[/yellow]", highlight=False)


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    extension: str,
    verbose: bool,
    preview: bool = False,
    strict: bool = False,
    skip_empty: bool = False,
) -> Optional[bool]:
    """Process a single file.

    Returns True on success, False on failure, and None when ``skip_empty``
    is set and the file holds no gloss blocks.
    """
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    if output_path is None:
        output_path = generate_output_path(input_path, extension)

    if output_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        console.print(
            f"[red]Error:[/red] Unsupported output format: {output_path.suffix}. "
            f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return False

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        if not preview:
            console.print(f"[blue]Output:[/blue] {output_path}")

    transformer = GlossTransformer()
    try:
        if preview:
            text = input_path.read_text(encoding="utf-8")
            document = transformer.transform_text(text, source=str(input_path))
            if skip_empty and not document.results:
                raise NoGlossBlocksError(f"No gloss blocks found in {input_path}")
            for table in document.tables:
                console.print(build_preview_table(table))
        else:
            document = transformer.transform_file(input_path, output_path)
            console.print(f"[green]Success:[/green] {output_path}")
    except TransformationError as e:
        if skip_empty and isinstance(e, NoGlossBlocksError):
            console.print(f"[yellow]Skipping:[/yellow] {input_path.name} (no gloss blocks)")
            return None
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        return False

    report_diagnostics(document)
    return not (strict and document.diagnostics)


def process_folder(
    folder_path: Path,
    extension: str,
    verbose: bool,
    preview: bool = False,
    strict: bool = False,
    recursive: bool = True,
) -> tuple[int, int, int]:
    """Process all markdown files in a folder.

    Files without gloss blocks are skipped, not counted as failures.

    Returns:
        (success_count, fail_count, skip_count)
    """
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0, 0

    files: list[Path] = []
    for ext in SOURCE_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip our own output
    files = sorted(f for f in files if not f.stem.endswith(OUTPUT_SUFFIX))

    if not files:
        console.print(f"[yellow]No markdown files found in {folder_path}[/yellow]")
        return 0, 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0
    skip_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Processing {file_path.name}...")
            outcome = process_file(
                file_path, None, extension, verbose, preview, strict,
                skip_empty=True,
            )
            if outcome is None:
                skip_count += 1
            elif outcome:
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count, skip_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Markdown file or folder to process",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only); its extension picks the format",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format when --output is not given: html, md, txt or docx",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        "-p",
        help="Print glosses to the terminal instead of writing files",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Exit with an error if any gloss block is malformed",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render :::gloss blocks as interlinear gloss tables.

    Examples:

        glossa notes.md

        glossa notes.md -o notes.docx

        glossa notes.md --format md  # Substitute HTML into the markdown

        glossa /path/to/folder --format txt

        glossa notes.md --preview
    """
    configure_logging(verbose)
    settings = get_settings()
    extension = output_format or settings.default_format
    if not extension.startswith("."):
        extension = f".{extension}"
    strict = strict or settings.fail_on_error

    if path.is_file():
        success = process_file(path, output, extension, verbose, preview, strict)
        raise typer.Exit(0 if success else 1)
    else:
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                f"Files will be saved alongside originals with {OUTPUT_SUFFIX} suffix."
            )

        success, fail, skipped = process_folder(
            path, extension, verbose, preview, strict
        )
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed, {skipped} skipped"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
