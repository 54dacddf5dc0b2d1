"""Command-line interface for the localizer."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from localizer import __version__
from localizer.config import load_settings, validate_start_id
from localizer.logging_config import setup_logging
from localizer.migration import migrate
from localizer.models import RecordKind
from localizer.parsers.wxr_parser import WxrItem, filter_items, find_items, load_wxr
from localizer.splitting import IdAllocator
from localizer.storage.sql_writer import save_corrections, write_statements
from localizer.storage.wxr_writer import save_wxr
from localizer.taxonomy import collect_tags, tag_statements
from localizer.titles import title_translation_statements

app = typer.Typer(
    name="localizer",
    help="Migrate a WordPress WXR export from Polyglot markup to Polylang items.",
)
console = Console()


@app.command()
def split(
    infile: Path = typer.Argument(..., help="WXR export to migrate"),
    outfile: Path = typer.Argument(..., help="Where to write the migrated WXR"),
    next_post_id: int = typer.Argument(..., help="Next free post id of the target site"),
    next_term_id: int | None = typer.Argument(
        None, help="Next free term id (accepted for compatibility, unused)"
    ),
    settings_file: Path | None = typer.Option(
        None, "--settings", "-s", help="YAML file with language pair, suffixes and site URL"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every item"),
) -> None:
    """Split bilingual items into one item per language.

    Run exactly once per original export: items that were already split
    carry no language markup and pass through unchanged.
    """
    setup_logging(logging.DEBUG if verbose else logging.INFO)

    try:
        validate_start_id(next_post_id)
        if next_term_id is not None:
            validate_start_id(next_term_id, "next_term_id")
        settings = load_settings(settings_file)

        console.print(f"[bold]Migrating {infile}[/bold]")
        doc = load_wxr(infile)
        result = migrate(doc, next_post_id, settings)

        console.print(f"  Split items: [green]{result.split_items}[/green]")
        console.print(f"  Split attachments: [green]{result.split_attachments}[/green]")
        console.print(f"  Next free post id: {result.next_post_id}")

        save_wxr(doc, outfile)
        sql_files = save_corrections(result, outfile, settings.table_prefix)
        console.print()
        console.print(f"[bold green]Saved to:[/bold green] {outfile}")
        for path in sql_files:
            console.print(f"  {path}")

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


@app.command("localize-tags")
def localize_tags(
    wxrfile: Path = typer.Argument(..., help="WXR export holding the tags"),
    next_term_id: int = typer.Argument(..., help="Next free term id of the target site"),
    language_term_id: int = typer.Option(
        ...,
        "--language-term-id",
        help="Term id of the other language in the 'language' taxonomy",
    ),
    settings_file: Path | None = typer.Option(
        None, "--settings", "-s", help="YAML file with language pair, suffixes and site URL"
    ),
) -> None:
    """Write SQL creating other-language copies of all post tags."""
    try:
        settings = load_settings(settings_file)
        allocator = IdAllocator(next_term_id, "next_term_id")
        tags = collect_tags(load_wxr(wxrfile), allocator, settings)
        output = write_statements(
            tag_statements(tags, language_term_id, settings, settings.table_prefix),
            Path(f"{wxrfile}.tagmeta.sql"),
        )
        console.print(f"  Tags: {len(tags)}")
        console.print(f"[bold green]Saved to:[/bold green] {output}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


@app.command("translate-titles")
def translate_titles(
    infile: Path = typer.Argument(..., help="Bilingual titles, one per line"),
    outfile: Path = typer.Argument(..., help="Where to write the SQL"),
    settings_file: Path | None = typer.Option(
        None, "--settings", "-s", help="YAML file with language pair, suffixes and site URL"
    ),
) -> None:
    """Write SQL restoring other-language titles lost by the export."""
    try:
        settings = load_settings(settings_file)
        with open(infile, encoding="utf-8") as f:
            statements = title_translation_statements(f, settings, settings.table_prefix)
        write_statements(statements, outfile)
        console.print(f"[bold green]Saved to:[/bold green] {outfile}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


@app.command("item-ids")
def item_ids(wxrfile: Path = typer.Argument(..., help="WXR export")) -> None:
    """Count the items of an export and list their post ids."""
    try:
        items = find_items(load_wxr(wxrfile))
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    console.print(f"Count of items found: {len(items)}")
    for elem in items:
        console.print(WxrItem(elem).describe())


def _is_attachment(item: WxrItem) -> bool:
    return item.kind is RecordKind.ATTACHMENT


@app.command("separate-attachments")
def separate_attachments(
    wxrfile: Path = typer.Argument(..., help="WXR export ending in .xml"),
) -> None:
    """Split an export into an attachments file and a posts file.

    Either file can be imported on its own, so a timed-out attachment
    import can be retried without re-importing all posts.
    """
    try:
        doc = load_wxr(wxrfile)
        attachments = filter_items(doc, _is_attachment)
        posts = filter_items(doc, lambda item: not _is_attachment(item))

        stem = wxrfile.with_suffix("")
        for doc_part, name in ((attachments, "attachments"), (posts, "posts")):
            output = save_wxr(doc_part, Path(f"{stem}.{name}.xml"))
            console.print(f"[bold green]Saved to:[/bold green] {output}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"localizer {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
