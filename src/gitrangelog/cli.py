"""Command-line interface for gitrangelog."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitrangelog.exceptions import ChangelogError
from gitrangelog.history import GitHistoryStore
from gitrangelog.logs import configure_logging
from gitrangelog.models import Settings, load_config
from gitrangelog.pipeline import collect_range, generate_report
from gitrangelog.report import truncate_id

app = typer.Typer(
    name="gitrangelog",
    help="Deployment changelogs from a range of Git history",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _fail(error: Exception) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(1)


@app.command()
def generate(
    start: str = typer.Option(..., "--start", "-s", help="Start commit hash or reference (excluded)"),
    end: str = typer.Option("HEAD", "--end", "-e", help="End commit hash or reference (included)"),
    repo_path: Optional[Path] = typer.Option(None, "--repo", "-r", help="Path to Git repository"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to JSON report config"),
    output: Optional[Path] = typer.Option(None, "--out", "-o", help="Output file (default: stdout)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Write a Markdown changelog for the commits between two endpoints."""
    settings = Settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        config = load_config(config_path or settings.config_path)
        store = GitHistoryStore(repo_path or settings.repo_path)
        text = generate_report(store, start, end, config)

        if output:
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w", encoding="utf-8") as f:
                f.write(text)
            err_console.print(f"[bold green]✓[/bold green] Saved to {escape(str(output))}", soft_wrap=True)
        else:
            typer.echo(text, nl=False)
    except (ChangelogError, OSError) as e:
        _fail(e)


@app.command("log")
def log_range(
    start: str = typer.Option(..., "--start", "-s", help="Start commit hash or reference (excluded)"),
    end: str = typer.Option("HEAD", "--end", "-e", help="End commit hash or reference (included)"),
    repo_path: Optional[Path] = typer.Option(None, "--repo", "-r", help="Path to Git repository"),
    digits: int = typer.Option(8, "--digits", "-d", help="Hash characters to show (0 for full hash)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List the commits between two endpoints, newest first."""
    settings = Settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        store = GitHistoryStore(repo_path or settings.repo_path)
        result = collect_range(store, start, end)

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Hash", style="cyan")
        table.add_column("Author", style="green")
        table.add_column("Date", style="blue")
        table.add_column("Message", style="white")

        for commit_id in result.chain:
            commit = store.get_commit(commit_id)
            table.add_row(
                truncate_id(commit.id, digits),
                escape(commit.author_name[:20]),
                commit.timestamp.strftime("%Y-%m-%d %H:%M"),
                escape(commit.summary[:60]),
            )

        console.print(
            f"[bold green]{len(result.chain)} commits[/bold green] "
            f"from {truncate_id(result.start.id, digits)} to {truncate_id(result.end.id, digits)}"
        )
        console.print(table)
    except (ChangelogError, OSError) as e:
        _fail(e)


@app.command()
def version() -> None:
    """Show version information."""
    from gitrangelog import __version__

    console.print(f"[bold]gitrangelog[/bold] version {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
