"""CLI entry point. All commands are defined here."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from printcheck import __version__

app = typer.Typer(
    name="printcheck",
    help="Detect PDF content that is expensive to print.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"printcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """printcheck: print optimization checks for PDFs."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def check(
    pdf: Path = typer.Argument(..., help="Path to the PDF file to analyze."),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", "-c", help="YAML config file with custom thresholds.",
    ),
    report: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--report", "-r", help="Write a report to this path.",
    ),
    report_format: Optional[str] = typer.Option(  # noqa: UP007
        None, "--format", "-f", help="Report format: json or markdown.",
    ),
) -> None:
    """Check whether a PDF should be optimized before printing."""
    import yaml
    from pydantic import ValidationError
    from rich.markup import escape

    from printcheck.analyzer import PrintAnalyzer
    from printcheck.config import PrintCheckConfig
    from printcheck.errors import AnalysisError

    if not pdf.is_file():
        console.print(f"[red]File not found:[/red] {pdf}")
        raise typer.Exit(code=1)

    try:
        cfg = PrintCheckConfig.load(config)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        console.print(f"[red]Invalid config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    analyzer = PrintAnalyzer(cfg.thresholds.to_model())

    try:
        issues = analyzer.analyze_file(pdf)
    except AnalysisError as exc:
        console.print(f"[red]Analysis failed:[/red] {exc}")
        raise typer.Exit(code=1)

    def flag(value: bool) -> str:
        return "[yellow]Yes[/yellow]" if value else "[green]No[/green]"

    table = Table(title=f"Print Check: {pdf.name}")
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Pages", str(issues.page_count))
    table.add_row("Color content", flag(issues.has_color_content))
    table.add_row("Background elements", flag(issues.has_background_elements))
    table.add_row("Large images", flag(issues.has_large_images))

    console.print(table)
    console.print("[dim]Only the first page is inspected.[/dim]")

    from printcheck.reporter import recommendations, write_report

    recs = recommendations(issues)
    if recs:
        console.print()
        for rec in recs:
            console.print(f"  [yellow]![/yellow] {rec}")
    else:
        console.print("[green]OK[/green] No optimization needed before printing.")

    if report is not None:
        fmt = report_format or cfg.output.report_format
        try:
            write_report(issues, pdf, report, fmt)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=1)
        console.print(f"[dim]Report written to {report}[/dim]")


@app.command()
def serve(
    port: int = typer.Option(8080, "--port", "-p", help="Port to serve on."),
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to."),
) -> None:
    """Start the HTTP analysis API."""
    try:
        import uvicorn
    except ImportError:
        console.print(
            "[red]The web API requires extra dependencies.[/red]\n"
            "Install them with: [bold]pip install printcheck\\[web\\][/bold]"
        )
        raise typer.Exit(code=1)

    from printcheck.web.app import create_app

    console.print(f"[dim]Serving analysis API at http://{host}:{port}[/dim]")
    uvicorn.run(create_app(), host=host, port=port, log_level="warning")
