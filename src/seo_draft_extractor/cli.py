"""
Command-line interface for SEO Draft Extractor.

Extracts draft metadata, FAQs and the disclaimer from a Word document
or converted HTML file.
"""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import ExtractionConfig
from .content_sources import ContentExtractionError
from .extractor import extract_from_file
from .models import ExtractionResult

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.argument(
    "source",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the extraction result as JSON.",
)
@click.option(
    "--payload",
    is_flag=True,
    default=False,
    help="Print the CMS draft request body as JSON.",
)
@click.option(
    "--no-schema",
    is_flag=True,
    default=False,
    help="Ignore embedded FAQPage schema blocks.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
def main(
    source: Path,
    as_json: bool,
    payload: bool,
    no_schema: bool,
    verbose: bool,
) -> None:
    """
    SEO Draft Extractor - Pull draft fields out of a Word document.

    Reads SOURCE (.docx or converted .html) and reports the metadata
    fields, FAQ entries and disclaimer found in it.

    Examples:

        seo-extract post.docx

        seo-extract post.docx --payload
    """
    _configure_logging(verbose)

    if as_json and payload:
        console.print("[red]Error:[/red] Provide only one of --json or --payload")
        sys.exit(1)

    config = ExtractionConfig.without_schema() if no_schema else ExtractionConfig()

    try:
        result = extract_from_file(source, config=config)
    except ContentExtractionError as e:
        console.print(f"[red]Content extraction error:[/red] {e}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif payload:
        click.echo(json.dumps(
            result.to_draft_payload(config.default_title), indent=2, ensure_ascii=False
        ))
    else:
        _display_summary(result)


def _display_summary(result: ExtractionResult) -> None:
    """Display extraction summary."""
    meta_table = Table(title="Extracted Metadata", show_header=True)
    meta_table.add_column("Field", style="cyan")
    meta_table.add_column("Value", style="green")

    labels = {
        "title": "Title",
        "metaTitle": "Meta Title",
        "metaDescription": "Meta Description",
        "metaKeywords": "Meta Keywords",
        "canonicalUrl": "Canonical URL",
    }
    for key, value in result.metadata.to_dict().items():
        meta_table.add_row(labels[key], value or "[dim](not found)[/dim]")

    console.print(meta_table)

    if result.faqs:
        console.print(
            f"\n[cyan]FAQs:[/cyan] {len(result.faqs)} question(s) extracted "
            f"from {result.faq_source}"
        )
        for index, faq in enumerate(result.faqs, 1):
            question = faq.question if len(faq.question) <= 50 else faq.question[:50] + "..."
            console.print(f"  {index}. {question}", markup=False)
    else:
        console.print("\n[cyan]FAQs:[/cyan] (not found)")

    if result.disclaimer:
        disclaimer = result.disclaimer
        if len(disclaimer) > 100:
            disclaimer = disclaimer[:100] + "..."
        console.print("[cyan]Disclaimer:[/cyan] ", end="")
        console.print(disclaimer, markup=False)
    else:
        console.print("[cyan]Disclaimer:[/cyan] (not found)")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
