"""Click CLI with export, remove-export, scan, lib-root and serve subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dart_librarian import __version__
from dart_librarian.commands import (
    Choice,
    export_file,
    remove_file_export,
)
from dart_librarian.locator import locate_lib_root
from dart_librarian.models import CommandStatus, LibrarianConfig
from dart_librarian.scanner import scan_export_candidates


class ClickPrompter:
    """Prompter backed by the terminal."""

    def choose(self, options: list[Choice], placeholder: str) -> Choice | None:
        click.echo(placeholder)
        for index, option in enumerate(options, start=1):
            description = f"  {click.style(option.description, dim=True)}" if option.description else ""
            click.echo(f"  {index}) {option.label}{description}")
        answer = click.prompt(
            "Choice (empty to cancel)",
            default="",
            show_default=False,
            type=str,
        ).strip()
        if not answer:
            return None
        if not answer.isdigit() or not 1 <= int(answer) <= len(options):
            raise click.BadParameter(f"expected a number between 1 and {len(options)}")
        return options[int(answer) - 1]

    def ask_text(self, prompt: str, placeholder: str = "") -> str | None:
        if placeholder:
            prompt = f"{prompt} ({placeholder})"
        answer = click.prompt(prompt, default="", show_default=False, type=str)
        return answer.strip() or None

    def info(self, message: str) -> None:
        click.echo(message)

    def warning(self, message: str) -> None:
        click.echo(click.style(message, fg="yellow"), err=True)


def _report(status: CommandStatus, message: str | None, line: int | None = None) -> None:
    if status is CommandStatus.APPLIED:
        suffix = f" (line {line + 1})" if line is not None else ""
        click.echo(click.style(f"{message}{suffix}", fg="green"))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """dart-librarian: manage export statements in Dart barrel files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--target", "-t", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Export file to add the statement to")
def export(source: Path, target: Path | None):
    """Export SOURCE from a barrel file under its lib directory."""
    try:
        result = export_file(source.resolve(), ClickPrompter(), target=target and target.resolve())
    except (ValueError, OSError) as e:
        raise click.ClickException(str(e))
    _report(result.status, result.message, result.line)


@cli.command("remove-export")
@click.argument("source", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--target", "-t", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Export file to remove the statement from")
def remove_export_command(source: Path, target: Path | None):
    """Remove the export of SOURCE from a barrel file."""
    try:
        result = remove_file_export(
            source.resolve(), ClickPrompter(), target=target and target.resolve(),
        )
    except (ValueError, OSError) as e:
        raise click.ClickException(str(e))
    _report(result.status, result.message)


@cli.command()
@click.argument("lib_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default="lib")
@click.option("--recursive", "-r", is_flag=True, help="Include subdirectories")
@click.option("--include-private", is_flag=True, help="Include files starting with '_'")
def scan(lib_dir: Path, recursive: bool, include_private: bool):
    """List the files under LIB_DIR that can hold export statements."""
    candidates = scan_export_candidates(
        lib_dir, recursive=recursive, exclude_private=not include_private,
    )
    if not candidates:
        click.echo("No export candidates found.")
        return

    click.echo(f"\nFound {len(candidates)} candidate(s):\n")
    for candidate in candidates:
        marker = click.style(" (has library)", fg="cyan") if candidate.has_library else ""
        click.echo(f"  {candidate.relative_path}{marker}")


@cli.command("lib-root")
@click.argument("path", type=click.Path(path_type=Path))
def lib_root(path: Path):
    """Print the lib directory PATH belongs to."""
    root = locate_lib_root(path.resolve(), LibrarianConfig().lib_dir_name)
    if root is None:
        raise click.ClickException(f"No lib directory above {path}")
    click.echo(str(root))


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the edit-planning web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'dart-librarian[web]'"
        )

    from dart_librarian.web import create_app

    click.echo(f"Starting dart-librarian API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
